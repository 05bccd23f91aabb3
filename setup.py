from setuptools import find_packages, setup

setup(
    name="esddrop",
    version="0.1.0",
    description="Drag-and-drop front end that builds ESD converter command lines",
    author="esddrop contributors",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["esddrop", "esddrop.*"]),
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "esddrop = esddrop.cli:main",
        ],
    },
)
