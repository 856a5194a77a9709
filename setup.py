"""
Packaging for chatmemory - conversation histories stored in Redis.
"""
from setuptools import setup, find_packages

setup(
    name="chatmemory",
    version="1.0.0",
    description="Redis-backed conversation memory repository for chat applications",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "redis>=5.0",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "fakeredis>=2.20",
        ],
    },
)
