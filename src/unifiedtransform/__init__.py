# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from unifiedtransform.geometric_types import Point
from unifiedtransform.transform import Affine2D, UnifiedTransform, is_rotation_matrix
from unifiedtransform.transform_meta import MatrixOrder
from unifiedtransform.transform_parser import Operation, iter_operations


__all__ = [
    "Affine2D",
    "MatrixOrder",
    "Operation",
    "Point",
    "UnifiedTransform",
    "is_rotation_matrix",
    "iter_operations",
]
