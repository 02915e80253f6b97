from setuptools import setup, find_namespace_packages

extras_require = {
    "dev": [
        "black==23.3.0",
        "flake8==6.1.0",
        "Flake8-pyproject==1.2.3",
        "isort==5.12.0",
        "mypy==1.5.1",
        "pytest-cov==4.1.0",
        "pytest>=8.2.0",
    ],
}

setup(
    name="sa-id-util",
    packages=find_namespace_packages(where="src"),
    version="0.1.0",
    package_dir={"": "src"},
    package_data={
        "said": ["py.typed"],
        "said.service": ["py.typed"],
        "said.util": ["py.typed"],
    },
    description="South African ID number validation",
    python_requires=">=3.11",
    install_requires=[
        "beartype>=0.18.0",
        "pydantic>=2.0.0,<3.0.0",
        "pydantic-settings>=2.4.0,<3.0.0",
        "sentry-sdk>=1.39.1",
    ],
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "sa-id=said.cli:main",
        ],
    },
    test_suite="tests",
)
