#!/usr/bin/env python3
"""
Example: Tour of the pitch-class set engine.

This demonstrates canonical forms, interval vectors and relation tests
on a few familiar chords and scales.

Usage:
    python examples/set_class_tour.py
"""

from chuk_mcp_pcset import PitchClassSet, SetClassCatalog, analyze, relate


def main() -> None:
    """Print analyses of some common sets."""
    catalog = SetClassCatalog()

    # Example 1: Canonical forms of a chord given by note names
    print("D major triad")
    d_major = PitchClassSet.parse("D F# A")
    print(f"  pitch classes: {d_major}")
    print(f"  normal order:  {d_major.normal()}")
    print(f"  prime form:    {d_major.prime()}")

    # Example 2: Full analysis of the diatonic collection
    print("\nC major scale")
    scale = analyze(PitchClassSet.parse("C D E F G A B"), catalog)
    print(f"  interval-class vector: {scale.interval_class_vector}")
    print(f"  chroma: {scale.chroma:012b}")
    print(f"  complement: {scale.complement}")
    print(f"  names: {', '.join(scale.names)}")

    # Example 3: Relations between two chords in normal order
    print("\nC major vs. A minor (normal order)")
    relation = relate([0, 4, 7], [9, 0, 4], use_normal_form=True)
    print(f"  transposition number: {relation.transposition_number}")
    print(f"  index number: {relation.index_number}")
    print(f"  same set class: {relation.same_set_class}")


if __name__ == "__main__":
    main()
