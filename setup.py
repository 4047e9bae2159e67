"""Setup configuration for packview."""
from setuptools import setup

setup(
    name="packview",
    version="0.1.0",
    description="Live 3D viewer for bin-packing layouts (container + boxes)",
    author="Louis",
    author_email="",
    packages=["dataset", "geometry", "scene", "snapshot", "visualization"],
    package_data={"dataset": ["data_sample.json"]},
    py_modules=["config", "logging_config", "run_viewer"],
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.10.0",
        "pyyaml>=6.0.0",
        "numpy>=2.2.0",
        "pyvista>=0.44.0",
    ],
    extras_require={
        "dev": [
            "pytest>=9.0.0",
            "pytest-asyncio>=0.25.0",
            "pytest-cov>=6.0.0",
            "ruff>=0.15.0",
            "mypy>=1.19.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "packview=run_viewer:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
