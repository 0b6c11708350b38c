# setup.py
from setuptools import setup, find_packages

setup(
    name='CFCutils',
    version='1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.10',
    package_data={
        'CFCutils': ['templates/text/*.j2'],
    },
    install_requires=[
        'pymongo>=4.6',
        'jinja2>=3.1',
        'pyyaml>=6.0',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'cfc_db = CFCutils.cli.main:main',
        ],
    },
)
