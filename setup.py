from setuptools import setup, find_packages

setup(
    name="easyfetch",
    version="1.0.0",
    description="Minimal async HTTP request helper with normalized results",
    author="EasyFetch Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx>=0.25.1",
        "pydantic>=2.5.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.10",
)
