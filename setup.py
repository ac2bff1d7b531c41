"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='hmlevels',
	version='0.0.1',
	packages=['hmlevels'],
	entry_points={
		'console_scripts': ["hmlevels = hmlevels.cmdline:main"],
	},
	license='MIT',
	description='Hindley-Milner type inference with let-polymorphism, using level-based generalization',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Compilers",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
