from setuptools import setup

setup(
    name="platnav",
    version="0.1.0",
    description="Grid-derived navigation graphs, A* search and path following for 2D platformer agents",
    zip_safe=False,
    packages=[
        "platnav",
        "platnav.graph",
        "platnav.agents",
        "platnav.tools",
    ],
    install_requires=[
        "numpy",
        "networkx",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "platnav-plan=platnav.tools.plan_path:main",
        ],
    },
)
