from setuptools import setup, find_packages

setup(
    name='random-sql-generator',
    version='0.1.0',
    description='Generates random, structurally valid SQL statements for a small table schema.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['main'],
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: Apache License 2.0',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
    install_requires=[line.strip() for line in open("./requirements.txt").readlines() if line.strip()],
    extras_require={
        'test': ['pytest'],
    },
)
