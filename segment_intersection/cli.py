#!/usr/bin/env python3

# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Main user entry point - orchestrates loading, classifying, and exporting."""

import sys
import argparse
import logging
import math
from pathlib import Path

if __name__ == '__main__':
    sys.path.insert(0, str(Path(__file__).parent.parent))

from segment_intersection import job_io
from segment_intersection.exceptions import JobFileError
from segment_intersection.intersection import intersect
from segment_intersection.logging_config import setup_logging

DEFAULT_JOB = Path(__file__).parent.parent / "config" / "example_job.yaml"


def parse_arguments(argv=None):
    """Parse command line arguments with smart defaults."""
    parser = argparse.ArgumentParser(
        description="Classify intersections of 3D segment pairs from a YAML job file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use default job
  %(prog)s

  # Specify input job
  %(prog)s --input my_pairs.yaml

  # Specify both input and output
  %(prog)s --input my_pairs.yaml --output report.json

  # Looser tolerance, verbose output
  %(prog)s --input my_pairs.yaml --tolerance 1e-9 --verbose
        """
    )

    parser.add_argument(
        '--input', '-i',
        type=str,
        default=str(DEFAULT_JOB) if DEFAULT_JOB.exists() else None,
        help='Input YAML job file (default: config/example_job.yaml)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Output JSON file (default: auto-generated in <input dir>/generated/)'
    )

    parser.add_argument(
        '--tolerance', '-t',
        type=float,
        default=None,
        help='Comparison tolerance, overrides the job file (default: 1e-12)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Print detailed information for every pair'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Orchestrate loading, classifying, and exporting of segment pairs."""
    args = parse_arguments(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.input is None:
        print("ERROR: No input file specified and default job not found")
        print("Use --input to specify a YAML job file")
        return 1

    if args.tolerance is not None and not (math.isfinite(args.tolerance) and args.tolerance > 0.0):
        print(f"ERROR: Tolerance must be a finite positive number, got {args.tolerance}")
        return 1

    try:
        pairs, tolerance = job_io.load_job(args.input)
        if args.tolerance is not None:
            tolerance = args.tolerance

        if args.verbose:
            print(f"  Job: {Path(args.input).stem}")
            print(f"  Number of pairs: {len(pairs)}")
            print(f"  Tolerance: {tolerance:g}")
            print()

        classified = []
        for pair in pairs:
            result = intersect(pair.first, pair.second, eps=tolerance)
            classified.append((pair, result))

            if args.verbose:
                print(f"  {pair.name}: {result.type.name}")
                if result.point is not None:
                    p = result.point
                    print(f"    Point: [{p.x:.6f}, {p.y:.6f}, {p.z:.6f}]")

        print(f"Classified {len(classified)} pair(s)")

        if args.output is None:
            output_path = job_io.auto_generate_output_path(args.input)
            if args.verbose:
                print(f"Auto-generated output path: {output_path}")
        else:
            output_path = Path(args.output)

        metadata = {
            'input_file': str(Path(args.input).resolve()),
            'tolerance': tolerance,
        }

        job_io.export_report(classified, output_path, metadata)

        return 0

    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1
    except JobFileError as e:
        print(f"ERROR: Invalid job file - {e}")
        return 1
    except Exception as e:
        print(f"ERROR: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
