# setup.py
"""Setup script for ProcessArchitec."""

from setuptools import setup, find_packages

setup(
    name="processarchitec",
    version="1.0.0",
    description="Generates importable automation workflows from plain-language requirements",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "click>=8.0",
        "pyyaml>=6.0",
        "httpx>=0.24",
        "pydantic>=2.6",
        "pydantic-settings>=2.0",
        "structlog>=23.1",
        "fastapi>=0.100",
        "uvicorn>=0.23",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "black>=23.0",
            "flake8>=6.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "processarchitec=cli.main:cli",
            "parch=cli.main:cli",  # Short alias
        ],
    },
    python_requires=">=3.8",
)
