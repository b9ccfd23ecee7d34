"""Diamond-square height maps, terrain meshes and colouring, camera matrices, skybox layout and a scene model."""

__version__ = "0.1.0"