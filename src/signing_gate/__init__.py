"""
Signing Gate Task Collection
"""

from invoke import Collection

__version__ = '0.1.0'

# Create namespace and collect tasks from each submodule
namespace = Collection()

from .build.tasks import signing

# Signing tasks live in their own nested namespace
signing_collection = Collection.from_module(signing)
namespace.add_collection(signing_collection, name='signing')
