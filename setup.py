"""
ハイブ（Hive）ルールエンジンのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="hive-engine",
    version="1.0.0",
    description="ハイブ - 六角形の駒をつなげるボードゲームのルールエンジン",
    author="",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
)
