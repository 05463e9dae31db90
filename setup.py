from setuptools import find_packages, setup

# Base requirements for the framing engine and dashboard
base_requirements = [
    "asciichartpy",
    "blessed",
    "wcwidth",
]

# Requirements for development and testing
dev_requirements = [
    "pytest",
]

setup(
    name="termframe",
    version="0.1.0",
    description="ANSI-aware fixed-width terminal frames",
    packages=find_packages(include=["termframe", "termframe.*"]),
    license="MIT",
    python_requires=">=3.8",
    install_requires=base_requirements,
    extras_require={
        "all": base_requirements + dev_requirements,
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "termframe = termframe.cli:main",
        ],
    },
)
