from setuptools import find_packages
from setuptools import setup

setup(
    name="rdebugger",
    version="0.1.0",
    description="Launch/attach configuration resolution and custom DAP messages for the R debugger",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typing_extensions>=4.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.18.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "mypy>=0.940",
        ],
    },
    entry_points={
        "console_scripts": [
            "rdebugger=rdebugger.__main__:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
