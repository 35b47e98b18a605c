"""
Root conftest: puts the repository root on ``sys.path`` so the test
suite imports ``mapping_api`` and ``visual_mapping`` without an install.
"""
