# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemapper",
    version="0.1.0",
    description="Concurrent crawler that builds a sitemap of pages and assets",
    packages=find_packages(include=["sitemapper", "sitemapper.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12.3",
        "click>=8.1",
        "jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["sitemapper=sitemapper.cli:cli"],
    },
    python_requires=">=3.11",
)
