"""
drone-bazelisk-ecr - Drone plugin running Bazel against Amazon ECR
"""

__version__ = "0.3.0"

from .core import BazeliskPlugin, PluginError

__all__ = ["BazeliskPlugin", "PluginError"]
