from setuptools import setup, find_packages

setup(
    name="user_search",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    package_data={"app": ["data/*.xml"]},
    install_requires=[
        "pytest",
        "uvicorn",
        "fastapi",
        "pydantic>=2",
        "httpx>=0.27.0",
    ],
    extras_require={
        "test": ["pytest", "httpx>=0.27.0"],
    },
    python_requires='>=3.11',
)
