from setuptools import setup, find_packages
setup(
    name='mcengine',
    version='0.1',
    packages=find_packages('.', include=['mcengine', 'mcengine.*']),
    scripts=['make_sample.py'],
    install_requires=[
        'numpy>=1.25',
        'matplotlib>=3.0',
        'scipy>=1.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
