from setuptools import setup, find_packages

setup(
    name="mf-aws",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "boto3>=1.26.0",
        "pyotp>=2.6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mf-aws=mfaws.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Issue MFA-backed temporary AWS credentials as shell statements",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
