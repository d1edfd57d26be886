"""Benchmark tokenize on small and large config text.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only
"""

try:
    import pytest

    from flagtext import TokenizeConfig, tokenize

    @pytest.mark.benchmark(group="tokenize")
    def test_benchmark_tokenize_small(benchmark, small_config):
        """Benchmark a typical hand-written config block."""
        benchmark(tokenize, small_config)

    @pytest.mark.benchmark(group="tokenize")
    def test_benchmark_tokenize_large(benchmark, large_config):
        """Benchmark ~100KB of config text."""
        benchmark(tokenize, large_config)

    @pytest.mark.benchmark(group="tokenize")
    def test_benchmark_tokenize_large_double_only(benchmark, large_config):
        """Fewer quote kinds to try per fragment."""
        config = TokenizeConfig(quote_kinds=("double",))
        benchmark(tokenize, large_config, config=config)

except ImportError:
    pass
