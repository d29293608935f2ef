#!/usr/bin/env python3
"""
Latency measurement script for the dashboard endpoints

Run the API with SEED_DEMO_DATA=true first, then:
    python measure_latency.py [patient_id]

Measures GET /patients/{id}, GET /patients/{id}/dashboard for each window,
and GET /patients/{id}/vitals.
"""
import statistics
import sys
import time
import requests

API_BASE = "http://127.0.0.1:8000/api/v1"
DEVICE_ID = "latency-test-device"
DEFAULT_PATIENT_ID = "1"
NUM_ITERATIONS = 10
WINDOWS = ("24h", "7d", "30d")


def measure_endpoint(name: str, url: str, headers: dict):
    """Measure latency for a single endpoint"""
    times = []
    errors = 0

    print(f"\nMeasuring {name}...")

    for i in range(NUM_ITERATIONS):
        start = time.time()
        try:
            response = requests.get(url, headers=headers, timeout=5)
        except requests.RequestException as e:
            errors += 1
            print(f"  Iteration {i+1}: ERROR - {e}")
            continue
        duration = (time.time() - start) * 1000
        times.append(duration)
        if response.status_code != 200:
            errors += 1
            print(f"  Iteration {i+1}: {response.status_code} - {duration:.2f}ms")
        else:
            print(f"  Iteration {i+1}: {duration:.2f}ms")

    if not times:
        print(f"  ERROR: All requests failed for {name}")
        return None

    result = {
        'name': name,
        'avg': statistics.mean(times),
        'median': statistics.median(times),
        'min': min(times),
        'max': max(times),
        'p95': statistics.quantiles(times, n=20)[18] if len(times) > 1 else times[0],
        'errors': errors,
    }
    print(f"  avg={result['avg']:.2f}ms median={result['median']:.2f}ms "
          f"p95={result['p95']:.2f}ms errors={errors}/{NUM_ITERATIONS}")
    return result


def main():
    """Run latency measurements"""
    patient_id = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_PATIENT_ID
    endpoints = [(f"GET /patients/{patient_id}", f"{API_BASE}/patients/{patient_id}")]
    endpoints += [
        (f"GET /patients/{patient_id}/dashboard?window={window}",
         f"{API_BASE}/patients/{patient_id}/dashboard?window={window}")
        for window in WINDOWS
    ]
    endpoints.append((f"GET /patients/{patient_id}/vitals", f"{API_BASE}/patients/{patient_id}/vitals"))

    results = []
    for name, url in endpoints:
        result = measure_endpoint(name, url, {'X-Device-ID': DEVICE_ID})
        if result:
            results.append(result)

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)
    if not results:
        print("No successful measurements")
        sys.exit(1)

    total_avg = sum(r['avg'] for r in results) / len(results)
    print(f"\nAverage latency across all endpoints: {total_avg:.2f}ms")
    print("\nPer-endpoint averages:")
    for r in results:
        print(f"  {r['name']:45} {r['avg']:7.2f}ms (median: {r['median']:.2f}ms)")


if __name__ == "__main__":
    main()
