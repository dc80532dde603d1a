# This file is part of gccounter.
# Licensed under MIT License.
