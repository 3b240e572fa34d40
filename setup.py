from setuptools import find_packages, setup

setup(
    name="changetrack",
    version="0.1.0",
    description="Recursive change tracking for nested dicts and lists",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
