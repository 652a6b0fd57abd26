from setuptools import find_packages, setup


setup(
    name='userdisplay',
    version='1.0.0',
    install_requires=[
        'Django>=5.2,<6.1',
    ],
    extras_require={
        'test': [
            'pytest>=8.0,<9.0',
        ],
    },
    packages=find_packages(include=('userdisplay', 'userdisplay.*')),
)
