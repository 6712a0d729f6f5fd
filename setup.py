from setuptools import setup

setup(
    name="halffloat",
    version="0.1.0",  # Match halffloat.version
    description="IEEE 754 binary16 half precision storage type",
    author="Nadav Rotem",
    author_email="nadav256@gmail.com",
    package_data={"halffloat": ["py.typed"]},
    packages=["halffloat"],
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
    python_requires=">=3.8",
)
