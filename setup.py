from setuptools import setup, find_packages
import re
import os

# Read version from version.py without importing it
version_file = os.path.join("google_places", "version.py")
with open(version_file, "r") as f:
    version_content = f.read()

# Extract version using regex
version_match = re.search(r'__version__\s*=\s*["\']([^"\']+)["\']', version_content)
if not version_match:
    raise RuntimeError(f"Unable to find version string in {version_file}")
version = version_match.group(1)

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="google_places",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests>=2.26.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "tenacity>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.10.0",
            "responses>=0.23.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.10.0",
            "responses>=0.23.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
            "types-requests>=2.28.0",
        ],
    },
    python_requires=">=3.10",
    description="Client for the legacy Google Places web API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
