from setuptools import setup, find_packages

setup(
    name='togglPy',
    version='0.1.0',
    description='A CLI tool for summarising Toggl Track time entries by project.',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'markdown',
        'rich',
        'dateparser',
    ],
    entry_points={
        'console_scripts': [
            'togglpy=togglpy.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['togglpy.env.example'],
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
