"""Data Ingestion Package

Additive seeding of nouns and sentence templates from YAML files.
"""
from ingest.seed import SeedFile, SeedStats, parse_seed, seed_data, seed_from_files

__all__ = [
    "SeedFile", "SeedStats",
    "parse_seed", "seed_data", "seed_from_files",
]
