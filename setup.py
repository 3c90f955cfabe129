from setuptools import find_packages, setup

setup(
    name="forwardsec",
    version="0.0.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "cryptography>=41",
        "pydantic>=2",
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "forwardsec=forwardsec.cli:cli",
        ],
    },
)
