import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("bigint/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="bigint-chunked",
    version=version,
    description="Arbitrary-precision signed integers in base-1,000,000,000 decimal chunks.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    extras_require={
        'test': ['hypothesis'],
    },
    entry_points={
        'console_scripts': [
            'bigint-reverse-power=bigint.reverse_power:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # bignum
            # long arithmetic
            # decimal rendering
    ],
)
