from setuptools import find_packages, setup

setup(
    name="rotating-calipers",
    version="0.1.0",
    packages=find_packages(
        include=["rotating_calipers", "rotating_calipers.*"]
    ),
    install_requires=["Pillow"],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-cov",
            "numpy",
        ]
    },
)
