# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Orbit domain: element sets, geometry, satellites, registry, animation."""
