"""Test package for Venn Deduction.

Core tests exercise the pure engine (geometry, matching, generation, drag,
evaluation). Headless sims script whole pointer sequences through a Scene.
Smoke tests run the pygame host with SDL's dummy drivers, so no window opens.
Run ``pytest`` from the project root.
"""
