from setuptools import setup, find_packages

setup(
    name="pauli-qasm",
    version="0.1.0",
    description="Translate sums of Pauli operators into OpenQASM circuits",
    package_dir={"": "qasm_pkg"},
    packages=find_packages("qasm_pkg", exclude=["tests", "integration_test"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "scipy",
        "qiskit>=1.0",
        "tqdm",
    ],
    extras_require={
        "qasm3": ["qiskit-qasm3-import"],
        "test": ["pytest"],
    },
    zip_safe=False,
)
