import setuptools
import os

# READMEファイルがあれば読み込む
long_description = ""
if os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()

# パッケージ設定
setuptools.setup(
    name="filecoll",
    version="0.1.0",
    author="filecoll Team",
    description="Directory and archive entry collections with a common interface",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "."},
    packages=setuptools.find_packages(where=".", include=["filecoll", "filecoll.*", "logutils"]),
    python_requires=">=3.8",
    install_requires=[
        "rarfile>=4.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    include_package_data=True,
)
