from setuptools import setup, find_packages

setup(
    name="heap_utils",
    version="0.1.0",
    description="Binary heap primitives (heapify/push/pop/top-k) over caller-owned sequences",
    packages=find_packages(exclude=["*.tests"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "numpy",
            "psutil",
            "pytest",
        ],
    },
    zip_safe=False,
)
