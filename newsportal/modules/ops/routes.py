"""
Ops Routes
==========

Public health endpoint.
"""

import shutil
import time
from datetime import datetime

from flask import current_app, jsonify

from . import ops_health_bp
from ...core.supabase_client import is_configured

DISK_WARNING_PERCENT = 85
DISK_CRITICAL_PERCENT = 95


def _get_disk_usage():
    """Get disk usage for root partition."""
    try:
        usage = shutil.disk_usage('/')
        return {
            'total_gb': round(usage.total / (1024 ** 3), 1),
            'used_gb': round(usage.used / (1024 ** 3), 1),
            'free_gb': round(usage.free / (1024 ** 3), 1),
            'percent': round((usage.used / usage.total) * 100, 1),
        }
    except Exception as e:
        return {'total_gb': 0, 'used_gb': 0, 'free_gb': 0, 'percent': 0, 'error': str(e)}


def _get_uptime():
    """Process uptime since the app was initialised."""
    started = current_app.extensions['newsportal'].started_at
    uptime_seconds = max(time.time() - started, 0)

    days = int(uptime_seconds // 86400)
    hours = int((uptime_seconds % 86400) // 3600)
    minutes = int((uptime_seconds % 3600) // 60)

    return {
        'seconds': round(uptime_seconds),
        'formatted': f'{days}d {hours}h {minutes}m',
        'days': days,
    }


def _get_backend_status():
    """Whether Supabase credentials are configured (no network call)."""
    return {
        'configured': is_configured(),
        'url': current_app.config.get('SUPABASE_URL') or None,
    }


def _compute_status(disk, backend):
    """Derive overall status and issue list."""
    issues = []
    status = 'ok'

    disk_pct = disk.get('percent', 0)
    if disk_pct >= DISK_CRITICAL_PERCENT:
        status = 'critical'
        issues.append(f'Disk usage critical: {disk_pct}%')
    elif disk_pct >= DISK_WARNING_PERCENT:
        status = 'warning'
        issues.append(f'Disk usage high: {disk_pct}%')

    if not backend['configured']:
        if status == 'ok':
            status = 'warning'
        issues.append('Supabase credentials are not configured')

    return status, issues


def _build_health_response():
    """Build the health check response dict."""
    disk = _get_disk_usage()
    backend = _get_backend_status()
    status, issues = _compute_status(disk, backend)

    result = {
        'status': status,
        'timestamp': datetime.now().isoformat(),
        'checks': {
            'disk': disk,
            'uptime': _get_uptime(),
            'backend': backend,
        },
        'issues': issues,
    }
    return result, status


@ops_health_bp.route('/')
@ops_health_bp.route('')
def health_check():
    """Public health endpoint for uptime monitors."""
    data, status = _build_health_response()
    code = 503 if status == 'critical' else 200
    return jsonify(data), code
