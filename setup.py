"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='safemap',
	version='0.1.0',
	packages=['safemap', ],
	entry_points={
		'console_scripts': ["safemap = safemap.cmdline:main"],
	},
	license='MIT',
	description='A heterogeneous key/type map whose vocabulary is checked before anything uses it',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
		"Environment :: Console",
    ],
	python_requires='>=3.11',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)
