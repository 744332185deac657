from setuptools import setup, find_packages

setup(
    name="yao-gate",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "examples"]),
    python_requires=">=3.8",
    install_requires=[
        "cryptography",
        "python-dotenv",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
