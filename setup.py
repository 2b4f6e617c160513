import setuptools

setuptools.setup(
    name="dirrnd",
    version="0.1.0",
    description="Dirichlet random vectors from normalized Gamma variates",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    licence="Apache Licence Version 2.0",
    packages=setuptools.find_packages(include=["dirrnd", "dirrnd.*"]),
    python_requires=">=3.9",
    install_requires=[
        "jax>=0.4.14",
        "jaxlib>=0.4.14",
        "numpy",
        "tqdm",
    ],
    extras_require={"test": ["pytest"]},
)
