"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='recobj',
	version='0.1.0',
	packages=['recobj', ],
	entry_points={
		'console_scripts': ["recobj = recobj.cmdline:main"],
	},
	license='MIT',
	description='Tagged records with defaults, and single-inheritance classes with dynamic method dispatch',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Libraries",
		"Topic :: Software Development :: Interpreters",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
