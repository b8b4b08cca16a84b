from setuptools import find_packages, setup

package_name = 'depth_threshold'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    install_requires=[
        'setuptools',
        'numpy',
        'opencv-python',
        'pyrealsense2',
    ],
    zip_safe=True,
    maintainer='eipih',
    maintainer_email='2001sonickim@gmail.com',
    description='Live RealSense depth threshold preview (binary mask or color cut-out).',
    license='MIT',
    python_requires='>=3.8',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'depth-threshold = depth_threshold.main:main',
            'depth-threshold-viewer = depth_threshold.viewer:main',
        ],
    },
)
