from setuptools import setup, find_packages

setup(
    name="sysfile-tools",
    version="1.0.0",
    description="File-path and file-size helpers with a small command-line front end",
    author="Ashwin Nair",
    packages=find_packages(include=["sysfile", "sysfile.*"]),
    package_data={"sysfile": ["configs/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "argcomplete",
        "PyYAML",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sysfile = sysfile.cli:main"
        ],
    },
)
