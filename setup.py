from setuptools import setup, find_packages

setup(
    name="bigmatrix",
    version="0.1",
    description="Immutable arbitrary-precision decimal matrices with dense and sparse storage",
    long_description=("Arithmetic on immutable decimal matrices with exact or context-rounded precision. "
                      "Offers dense and sparse (default value plus explicit entries) representations, "
                      "sparsity-aware add, subtract, multiply, transpose, sum, product, round and equality, "
                      "and conversion from and to numpy and scipy.sparse."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["bigmatrix", "bigmatrix.*"]),
    install_requires=["numpy", "scipy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["decimal", "matrix", "sparse", "arbitrary precision"],
    zip_safe=False,
)
