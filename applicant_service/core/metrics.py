"""Prometheus Metrics.

This module defines and exports Prometheus metrics for monitoring the service:
- API requests and responses
- Applicant creation
- Image uploads, including images left orphaned by a rolled back creation
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    Info,
    generate_latest,
)

from .constants import Metrics

# ========================================
# Applicant Metrics
# ========================================

applicants_created_total = Counter(
    'applicants_created_total',
    'Total number of applicants created together with address and form'
)

applicant_image_uploads_total = Counter(
    'applicant_image_uploads_total',
    'Applicant photo uploads to the image host',
    ['outcome']
)

# Uploaded images whose database transaction was rolled back afterwards.
applicant_images_orphaned_total = Counter(
    'applicant_images_orphaned_total',
    'Uploaded applicant photos left without a referencing record'
)

# ========================================
# API Metrics
# ========================================

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

# ========================================
# Application Info
# ========================================

app_info = Info(
    'app',
    'Application information'
)


def set_app_info(version: str, environment: str):
    """Set application information for Prometheus.

    Call this during app startup.
    """
    app_info.info({
        'version': version,
        'environment': environment,
        'service': Metrics.SERVICE_NAME
    })


def get_metrics():
    """Get current Prometheus metrics in text format."""
    return generate_latest()


def get_content_type():
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
