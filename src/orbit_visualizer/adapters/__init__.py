# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for the display host and file I/O.

External concerns (scene storage, frame timing, JSON files) are confined
to this layer.
"""
