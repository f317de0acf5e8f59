'''
Campaign Assistant Backend Test Suite

Test Modules:
-------------
- test_metric_evaluator.py: Single-metric benchmark evaluation
  - Percentage normalization and its boundary at 1
  - Classification precedence, including inverted polarity (bounce rate)
  - Trend labels and message wording
  - Unbenchmarked metrics

- test_report_aggregator.py: Report synthesis
  - Non-numeric entries skipped, order preserved
  - Summary headline singular/plural
  - Adjustment recommendations and fallbacks
  - Request validation

- test_performance_csv.py: CSV template and first-row parsing

- test_api.py: HTTP contract and {"error": ...} envelope

Running Tests:
--------------
    pip install -e ".[test]"
    pytest campaign_assistant/tests/ -v
'''

__all__ = []
