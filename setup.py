from setuptools import setup, find_packages
setup(
    name='signing-gate',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'signing_gate': [
            'build/config/*.yaml',
        ],
    },
    description='Release signing resolution and build variant checks for Flutter Android apps.',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'signing-gate = signing_gate.cli:program.run',
        ],
    },
)
