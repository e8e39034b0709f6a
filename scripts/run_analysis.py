#!/usr/bin/env python
"""
Run the nugeom geometry analysis on one of the built-in box scenes.

Without arguments the default two-slab scene is analyzed and Data/ and
Figures/ are written next to this repository. With arguments the
``nugeom-run`` command line is used:

    -s/--scene {cube,two_slab,mixture,nested}   scene to analyze
    -n/--rays N                                 random rays for path lengths and vertices
    --scan-points N / --scan-rays N             bounding-box scan sizes
    --no-max                                    skip the max path-length scan
    --no-save / --no-plot                       skip CSV export / figures
    --output-dir DIR                            where Data/ and Figures/ go
    -v                                          show analyzer log messages

Example:
    python scripts/run_analysis.py --scene nested --no-max -n 500
"""

from pathlib import Path
import sys

# 添加项目根目录到路径（确保可以导入 nugeom）
project_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_dir))

from nugeom.runner import run_full_analysis, main as runner_main


def main():
    """脚本入口点"""
    if len(sys.argv) > 1:
        runner_main()
    else:
        # 无参数：双层平板，输出到项目目录
        run_full_analysis(output_dir=project_dir)


if __name__ == "__main__":
    main()
