from setuptools import setup, find_packages
import os

base_dir = os.path.dirname(__file__)  # Directory of the script
requirements_path = os.path.join(base_dir, 'requirements.txt')

with open(requirements_path) as f:
    required = f.read().splitlines()

setup(name='intervalQuadrature',
      version='0.1',
      description='Composite trapezoidal and Simpson rules for one dimensional integrals',
      license='MIT',
      packages=find_packages(include=['intervalQuadrature', 'intervalQuadrature.*']),
      install_requires=required,
      extras_require={'test': ['pytest']},
      include_package_data=True,
      zip_safe=False)
