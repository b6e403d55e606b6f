from src.common.metrics import MetricsCollector


def test_empty_collector():
    metrics = MetricsCollector().get_metrics()
    assert metrics.readings_generated == 0
    assert metrics.avg_generation_time_ms == 0.0

def test_records_and_averages():
    collector = MetricsCollector()
    collector.record_generation(2.0)
    collector.record_generation(4.0, reading_count=10)
    collector.record_ingestion()
    collector.record_alerts(3)

    metrics = collector.get_metrics().to_dict()
    assert metrics['readings_generated'] == 11
    assert metrics['readings_ingested'] == 1
    assert metrics['alerts_raised'] == 3
    assert metrics['avg_generation_time_ms'] == 3.0
    assert metrics['uptime_seconds'] >= 0

def test_buffer_is_bounded():
    collector = MetricsCollector()
    for _ in range(1005):
        collector.record_generation(1.0)
    assert len(collector.generation_times) == 1000
    assert collector.get_metrics().readings_generated == 1005
