from setuptools import setup

setup(
    name="py-async-tokens",
    version="0.1.0",
    description="Asynchronous delimiter/fixed-length token reader for chunked byte streams",
    packages=["py_async_tokens"],
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
)
