"""
Copyright 2026 photon-room authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Constants used throughout the photon room simulation.

Kept in their own module so that photons, rooms and the simulator can share
them without circular imports.
"""

# Smallest radius at which a MultiMagPhoton registers a corner (wall endpoint)
# hit, whatever its configured collision radius.
MIN_CORNER_CATCH_RADIUS = 0.3

# Room defaults for photons created through the simulator
DEFAULT_PHOTON_SPEED = 1.0
DEFAULT_COLLISION_RADIUS = 0.5

# Verbosity levels shared by Photon.bounce_off_segment and Simulator
VERBOSE_SILENT = 0
VERBOSE_INFO = 1
VERBOSE_DEBUG = 2
