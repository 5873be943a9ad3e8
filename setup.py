from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


setup(
    name="py-nft-metadata",
    packages=find_packages("src"),
    package_dir={"": "src"},
    version="0.1.0",
    description="Typed NFT metadata following the OpenSea metadata standard",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.9",
    install_requires=["pydantic>=2.5", "loguru"],
    extras_require={"test": ["pytest"]},
)
