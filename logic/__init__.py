"""logic — Game systems package.

Top-level modules
-----------------
tick            — per-frame system orchestrator (movement → animation → camera)
movement        — input-driven moves against the tile grid
animation       — spritesheet frame stepping
input_manager   — raw input → intent mapping
"""
