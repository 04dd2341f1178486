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


"""File I/O utilities for loading YAML segment jobs and exporting JSON reports."""

import json
import logging
import math
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import NamedTuple

import yaml

from .exceptions import DegenerateSegmentError, JobFileError
from .line_segment import LineSegment
from .vector import EPS

logger = logging.getLogger(__name__)


class SegmentPair(NamedTuple):
    name: str
    first: LineSegment
    second: LineSegment


def _parse_segment(segment_dict, where):
    if not isinstance(segment_dict, dict) or 'start' not in segment_dict or 'end' not in segment_dict:
        raise JobFileError(f"{where} missing 'start' or 'end'")
    try:
        return LineSegment(segment_dict['start'], segment_dict['end'])
    except DegenerateSegmentError as e:
        raise JobFileError(f"{where} is degenerate: {e}") from e
    except (TypeError, ValueError) as e:
        raise JobFileError(f"{where} has invalid coordinates: {e}") from e


def _parse_tolerance(value):
    try:
        tolerance = float(value)
    except (TypeError, ValueError) as e:
        raise JobFileError(f"Tolerance must be a number, got {value!r}") from e
    if not math.isfinite(tolerance) or not tolerance > 0.0:
        raise JobFileError(f"Tolerance must be a finite positive number, got {tolerance}")
    return tolerance


def load_job(yaml_path):
    """
    Load segment pairs from a YAML job file.

    Parameters
    ----------
    yaml_path : str
        Path to the YAML job file.

    Returns
    -------
    tuple
        A tuple containing the following elements:
        - pairs : list
            List of SegmentPair objects, in file order.
        - tolerance : float
            Comparison tolerance, EPS unless the file sets 'tolerance'.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    JobFileError
        If the YAML structure is invalid or a segment is degenerate.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Job file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise JobFileError("Job file must contain a mapping at top level")

    if 'pairs' not in config:
        raise JobFileError("Missing required key in YAML: 'pairs'")

    if not config['pairs']:
        raise JobFileError("No segment pairs defined in job file")

    if not isinstance(config['pairs'], list):
        raise JobFileError("'pairs' must be a list")

    tolerance = _parse_tolerance(config['tolerance']) if 'tolerance' in config else EPS

    pairs = []
    for i, pair_dict in enumerate(config['pairs']):
        if not isinstance(pair_dict, dict) or 'first' not in pair_dict or 'second' not in pair_dict:
            raise JobFileError(f"Pair {i} missing 'first' or 'second'")

        name = str(pair_dict.get('name', f'pair_{i}'))
        first = _parse_segment(pair_dict['first'], f"Pair '{name}' first segment")
        second = _parse_segment(pair_dict['second'], f"Pair '{name}' second segment")
        pairs.append(SegmentPair(name, first, second))

    names = [pair.name for pair in pairs]
    duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
    if duplicates:
        raise JobFileError(f"Duplicate pair names: {', '.join(duplicates)}")

    logger.info("Loaded %d segment pair(s) from %s", len(pairs), yaml_path)
    return pairs, tolerance


def export_report(classified_pairs, output_path, metadata=None):
    """
    Export classification results to a JSON file.

    Parameters
    ----------
    classified_pairs : list
        List of (SegmentPair, IntersectionResult) tuples.
    output_path : str
        Path where the JSON file will be written.
    metadata : dict, optional
        Optional metadata to include in the output file.

    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    type_counts = Counter(result.type.name for _, result in classified_pairs)

    data = {
        'metadata': {
            'generated_at': datetime.now().isoformat(),
            'num_pairs': len(classified_pairs),
            'counts': dict(sorted(type_counts.items())),
        },
        'pairs': {}
    }

    if metadata:
        data['metadata'].update(metadata)

    for pair, result in classified_pairs:
        entry = result.to_dict()
        entry['first'] = {'start': pair.first.start.tolist(), 'end': pair.first.end.tolist()}
        entry['second'] = {'start': pair.second.start.tolist(), 'end': pair.second.end.tolist()}
        data['pairs'][pair.name] = entry

    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info("Wrote report for %d pair(s) to %s", len(classified_pairs), output_path)


def auto_generate_output_path(input_path):
    """
    Generate a timestamped output path next to the input file.

    The output directory is <input dir>/generated/.
    """
    input_path = Path(input_path)
    job_name = input_path.stem
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    output_dir = input_path.resolve().parent / "generated"
    output_dir.mkdir(parents=True, exist_ok=True)

    output_filename = f"{job_name}_{timestamp}.json"
    return output_dir / output_filename
