from setuptools import setup, find_packages

setup(
    name="terroir",
    version="0.1.0",
    description="Terroir - match climate and soil conditions to wine regions and grape varieties.",
    author="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"terroir": ["data/*.json"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "pydantic>=2.0.0",
        "plotly>=5.15.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "app": ["streamlit>=1.30.0"],
        "test": ["pytest>=7.0.0", "pytest-cov>=4.0.0"],
    },
    entry_points={
        "console_scripts": [
            "terroir=terroir.cli:main",
        ],
    },
)
