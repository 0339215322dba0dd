import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import polybridge
from polybridge.metrics import measure_geometry
from shapely.geometry import box

from plot_geometry import plot_merge

shapes = [
    box(0, 0, 1, 1),
    box(3, 0.2, 4.2, 1.2),
    box(2, 2.5, 2.8, 3.2),
]

for factor in [0.5, 1.0, 2.0]:
    result = polybridge.merge_with_corridors(shapes, corridor_factor=factor)
    print(f"corridor_factor={factor}: {measure_geometry(result.output)}")
    for edge in result.debug.mst_edges:
        print(f"  {edge}")
    plot_merge(shapes, result, title=f"Corridor factor {factor}")
