from setuptools import setup, find_packages

setup(
    name="tailwind-mapper",
    version="1.0.0",
    packages=find_packages(include=['tailwind_mapper', 'tailwind_mapper.*']),
    install_requires=[
        'aiofiles',
        'orjson',
        'tinycss2>=1.2',
        'typing-extensions>=4.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-timeout',
        ],
    },
    python_requires='>=3.8',
    author="Kenneth Hanks",
    author_email="fourfigs@gmail.com",
    description="Convert CSS to TailwindCSS utility classes and look up Tailwind utilities and colors",
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
