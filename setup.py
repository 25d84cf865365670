from setuptools import setup, find_packages

setup(
    name="colorz",
    version="0.1.0",
    description="Single-screen demo that toggles a swatch between blue and red",
    author="mseibert",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    py_modules=["main", "app", "config"],
    python_requires=">=3.10",
    install_requires=[
        "Pillow>=10.1.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "colorz=main:main",
        ],
    },
)
