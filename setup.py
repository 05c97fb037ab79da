from setuptools import setup, find_packages

# Base requirements - always needed
install_requires = [
    "PyYAML>=6.0",
]

setup(
    name="gattfix",
    version="1.0.0",
    description="GATT conformance-test fixture library: identifier registry and test-case catalogs",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=install_requires,
    extras_require={
        "test": ["pytest>=8.0.0"],
    },
    package_data={
        "gattfix": ["data/*.yaml"],
    },
    entry_points={
        'console_scripts': [
            'gattfix=gattfix.cli:main',
        ],
    },
    python_requires='>=3.8',
)
