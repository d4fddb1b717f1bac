# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

__version__ = "0.3.0"
