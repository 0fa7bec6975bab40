import setuptools

setuptools.setup(
    name='date-diff',
    version='0.1',
    author='XuZhen86',
    packages=setuptools.find_namespace_packages(include=['date_diff', 'date_diff.*']),
    python_requires='>=3.11,<4',
    install_requires=[
        'absl-py>=2.1.0,<3',
        'python-dateutil>=2.8.2,<3',
    ],
    extras_require={
        'test': ['pytest>=8.0.0,<9'],
    },
    entry_points={
        'console_scripts': [
            'date-diff = date_diff.main:app_run_main',
        ],
    },
)
