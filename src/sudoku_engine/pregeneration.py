"""
Puzzle bank pre-generation.

Generates puzzles ahead of time so a game can start without running the
generator on the interactive path. Each puzzle gets its own RandomState
spawned from one seed, so a bank is reproducible regardless of thread
scheduling.

Supports checkpointing, resume, and appending to an existing bank.
"""

import os
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

import numpy as np
import pandas as pd
from tqdm.auto import tqdm

from .constants import Board
from .difficulty import normalize_difficulty
from .generator import generate_puzzle_with_solution
from .utils import load_json, save_json
from .validator import count_filled


# ============================================================================
# Data classes
# ============================================================================

@dataclass
class PuzzleRecord:
    puzzle_id: str
    difficulty: str
    puzzle: Board
    solution: Board
    clues: int
    generation_time_seconds: float = 0.0

    def to_dict(self) -> Dict:
        return {
            "puzzle_id": self.puzzle_id,
            "difficulty": self.difficulty,
            "puzzle": self.puzzle,
            "solution": self.solution,
            "clues": self.clues,
            "generation_time_seconds": self.generation_time_seconds,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "PuzzleRecord":
        return cls(
            puzzle_id=d["puzzle_id"], difficulty=d["difficulty"],
            puzzle=d["puzzle"], solution=d["solution"], clues=d["clues"],
            generation_time_seconds=d.get("generation_time_seconds", 0.0),
        )


# ============================================================================
# Single-puzzle generation (thread worker)
# ============================================================================

def generate_single_puzzle(
    puzzle_id: str, difficulty: str, seed_seq: np.random.SeedSequence
) -> PuzzleRecord:
    """Generate one bank entry (called inside thread pool)."""
    start_time = time.time()
    rng = np.random.RandomState(np.random.MT19937(seed_seq))
    puzzle, solution = generate_puzzle_with_solution(difficulty, rng=rng)
    return PuzzleRecord(
        puzzle_id=puzzle_id, difficulty=difficulty,
        puzzle=puzzle, solution=solution, clues=count_filled(puzzle),
        generation_time_seconds=time.time() - start_time,
    )


# ============================================================================
# Checkpointing helpers
# ============================================================================

def _get_checkpoint_path(save_path: str) -> str:
    base, ext = os.path.splitext(save_path)
    return f"{base}_checkpoint{ext}"


def _save_checkpoint(records, metadata, checkpoint_path):
    data = {
        "metadata": metadata,
        "completed_puzzle_ids": [r.puzzle_id for r in records],
        "puzzles": [r.to_dict() for r in records],
        "checkpoint_time": time.strftime("%Y-%m-%d %H:%M:%S"),
    }
    save_json(data, checkpoint_path)
    print(f"💾 Checkpoint: {len(records)} puzzles saved")


def _load_records(path: str) -> Tuple[List[PuzzleRecord], Dict]:
    if not os.path.exists(path):
        return [], {}
    return load_puzzle_bank(path)


def _reusable(records: List[PuzzleRecord], metadata: Dict, seed, wanted: Set[str]) -> List[PuzzleRecord]:
    """Records from an earlier run that belong to this bank."""
    if metadata.get("seed") != seed:
        print(f"   Skipping {len(records)} puzzles generated with seed {metadata.get('seed')}")
        return []
    return [r for r in records if r.puzzle_id in wanted]


# ============================================================================
# Main generation function
# ============================================================================

def generate_puzzle_bank(
    difficulties: Sequence[str] = ("easy", "medium", "hard"),
    per_difficulty: int = 10,
    seed: Optional[int] = None,
    max_workers: int = 4,
    save_path: Optional[str] = None,
    checkpoint_every: int = 5,
    resume_from_checkpoint: bool = True,
) -> List[PuzzleRecord]:
    """
    Generate `per_difficulty` puzzles for each difficulty in parallel.

    Args:
        difficulties: Difficulty labels; aliases are normalised and
            duplicates dropped.
        per_difficulty: Puzzles wanted per difficulty.
        seed: Root seed. Puzzle i of a difficulty always gets the same
            child seed, so resumed runs reproduce the same bank.
        max_workers: Thread pool size.
        save_path: Path to save JSON results. Puzzles already there with
            the same seed and a requested id are reused; the file is
            rewritten to hold exactly the requested bank.
        checkpoint_every: How often (in new puzzles) to checkpoint.
        resume_from_checkpoint: Whether to merge a leftover checkpoint.

    Returns:
        List of PuzzleRecord objects, ordered by difficulty then index.
    """
    if per_difficulty < 1:
        raise ValueError("per_difficulty must be at least 1")
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")
    if checkpoint_every < 1:
        raise ValueError("checkpoint_every must be at least 1")

    levels = list(dict.fromkeys(normalize_difficulty(d) for d in difficulties))
    wanted_ids = [f"{level}_{i}" for level in levels for i in range(per_difficulty)]
    wanted = set(wanted_ids)

    # Load existing data
    existing: Dict[str, PuzzleRecord] = {}
    if save_path and os.path.exists(save_path):
        print(f"📂 Loading existing bank from {save_path}...")
        records, saved_meta = _load_records(save_path)
        existing.update({r.puzzle_id: r for r in _reusable(records, saved_meta, seed, wanted)})
        print(f"   Reusing {len(existing)} existing puzzles")

    checkpoint_path = _get_checkpoint_path(save_path) if save_path else None
    if checkpoint_path and resume_from_checkpoint and os.path.exists(checkpoint_path):
        print("📂 Found checkpoint, loading...")
        records, cp_meta = _load_records(checkpoint_path)
        for r in _reusable(records, cp_meta, seed, wanted):
            existing.setdefault(r.puzzle_id, r)
        print(f"   After merging: {len(existing)} puzzles")

    root = np.random.SeedSequence(seed)
    level_seqs = dict(zip(levels, root.spawn(len(levels))))

    tasks = []
    for level in levels:
        for i, child in enumerate(level_seqs[level].spawn(per_difficulty)):
            puzzle_id = f"{level}_{i}"
            if puzzle_id not in existing:
                tasks.append((puzzle_id, level, child))

    metadata = {
        "difficulties": levels,
        "per_difficulty": per_difficulty,
        "seed": seed,
    }

    print(f"\n{'=' * 70}")
    print("PUZZLE BANK GENERATION")
    print(f"{'=' * 70}")
    print(f"  Existing: {len(existing)} puzzles")
    print(f"  To generate: {len(tasks)} puzzles")
    print(f"  Workers: {max_workers}")
    print(f"{'=' * 70}\n")

    results: Dict[str, PuzzleRecord] = dict(existing)
    start_time = time.time()

    if tasks:
        generated = 0
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(generate_single_puzzle, puzzle_id, level, child): puzzle_id
                for puzzle_id, level, child in tasks
            }
            for future in tqdm(as_completed(futures), total=len(futures), desc="Generating"):
                puzzle_id = futures[future]
                try:
                    record = future.result()
                except Exception as e:
                    print(f"  ❌ Puzzle {puzzle_id} failed: {e}")
                    continue
                results[puzzle_id] = record
                generated += 1
                if checkpoint_path and generated % checkpoint_every == 0:
                    _save_checkpoint(list(results.values()), metadata, checkpoint_path)
    else:
        print("✅ Bank already complete!")

    total_time = time.time() - start_time
    ordered = [results[pid] for pid in wanted_ids if pid in results]

    print(f"\n{'=' * 70}")
    print("✅ COMPLETE")
    print(f"{'=' * 70}")
    print(f"  Previously had: {len(existing)}")
    print(f"  Newly generated: {len(results) - len(existing)}")
    print(f"  Total now: {len(ordered)}")
    print(f"  Time: {total_time:.1f}s")

    if save_path:
        metadata["total_time_seconds"] = total_time
        save_json({"metadata": metadata, "puzzles": [r.to_dict() for r in ordered]}, save_path, indent=2)
        print(f"\n✓ Saved {len(ordered)} puzzles to {save_path}")
        if os.path.exists(checkpoint_path):
            os.remove(checkpoint_path)

    return ordered


# ============================================================================
# Load and analyse
# ============================================================================

def load_puzzle_bank(path: str) -> Tuple[List[PuzzleRecord], Dict]:
    """Load a saved bank. Returns (records, metadata)."""
    data = load_json(path)
    records = [PuzzleRecord.from_dict(d) for d in data.get("puzzles", [])]
    return records, data.get("metadata", {})


def analyze_puzzle_bank(records: List[PuzzleRecord]) -> Dict:
    """Print and return clue-count and timing summaries per difficulty."""
    if not records:
        return {"total_puzzles": 0, "by_difficulty": {}}

    df = pd.DataFrame(
        [
            {
                "difficulty": r.difficulty,
                "clues": r.clues,
                "generation_time_seconds": r.generation_time_seconds,
            }
            for r in records
        ]
    )

    grouped = df.groupby("difficulty")
    summary = {}
    for level, sub in grouped:
        summary[level] = {
            "count": int(len(sub)),
            "mean_clues": float(sub["clues"].mean()),
            "min_clues": int(sub["clues"].min()),
            "max_clues": int(sub["clues"].max()),
            "mean_time_seconds": float(sub["generation_time_seconds"].mean()),
        }

    print(f"\n{'=' * 70}")
    print("ANALYSIS")
    print(f"{'=' * 70}")
    print(f"Puzzles: {len(df)}")
    for level, stats in summary.items():
        print(
            f"  {level}: n={stats['count']}, clues={stats['mean_clues']:.1f} "
            f"[{stats['min_clues']}-{stats['max_clues']}], "
            f"time={stats['mean_time_seconds']:.2f}s"
        )
    return {"total_puzzles": int(len(df)), "by_difficulty": summary}
