from setuptools import setup, find_packages


setup(
    name="hashparams",
    use_scm_version={
        "write_to": "src/hashparams/_version.py",
        "fallback_version": "0.1.0",
    },
    description="Typed key/value parameters stored in URL fragments",
    # long_description=long_description,
    # long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": ["hashparams=hashparams.__main__:main"],
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "cattrs>=23.1",
        "PyYAML>=6.0",
    ],
    setup_requires=["setuptools_scm"],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Environment :: Console",
        "Environment :: Web Environment",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP",
    ],
)
