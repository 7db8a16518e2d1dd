"""
Packaging for the aslan environment client.
"""
from setuptools import setup, find_packages

setup(
    name="aslan-environment",
    version="0.1.0",
    description="Environment DTOs, share-env readiness and REST client for the aslan deployment service",
    packages=find_packages(include=["aslan", "aslan.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31",
        "pydantic>=2.6",
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.25",
        ],
    },
    entry_points={
        "console_scripts": [
            "aslan-env=aslan.cli:run",
        ],
    },
)
