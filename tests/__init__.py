"""Test suite for splinekit.

Test Structure:
- unit/: Unit tests for individual components
  - spline/: Solver, builder, evaluator, models and sampling
  - points/: PointSet handles, ordering and validation
  - editor/: SplineEditor selection and rebuild behaviour
  - config/: Config models and JSON/YAML loading
  - utils/: Logging and math helpers
  - cli/: Command-line entry point
- conftest.py: Shared fixtures and test configuration
"""
