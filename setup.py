from setuptools import setup

setup(
    name='objkit',
    version='0.1.0',
    description='Structural type classification, emptiness rules and key-value traversal helpers',
    author='Ziver-opensource',
    package_dir={'objkit': 'src/objkit'},
    packages=['objkit', 'objkit.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'objkit = objkit.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
