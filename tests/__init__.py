"""TEXTUTIL test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.

General guidance
- Tests run once per character width through the fixtures in conftest.py.
- Property-based tests live with the module they exercise and use @pytest.mark.property.
- Markers: unit, property
"""
