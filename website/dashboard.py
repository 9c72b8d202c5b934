# Standard Library
import os
import sys
import time
import logging
import datetime
import platform

# Third-party
import psutil
import humanize

# Django
from django.db import DatabaseError, connection
from django.db.models import Count
from django.http import HttpResponseServerError
from django.shortcuts import render

# Local Imports
from .models import AccessLog, Product
from .permissions import admin_required

logger = logging.getLogger(__name__)

RECENT_LOG_COUNT = 20


def visitor_map():
    """{country: visits} over all access logs, blank countries skipped."""
    rows = (
        AccessLog.objects.exclude(country="")
        .order_by()
        .values("country")
        .annotate(count=Count("id"))
    )
    return {row["country"]: row["count"] for row in rows}


def server_stats():
    memory = psutil.virtual_memory()
    uptime_seconds = time.time() - psutil.boot_time()
    return {
        "uptime": f"{int(uptime_seconds // 60)} min",
        "uptime_human": humanize.naturaldelta(datetime.timedelta(seconds=uptime_seconds)),
        "freemem": humanize.naturalsize(memory.available, binary=True),
        "totalmem": humanize.naturalsize(memory.total, binary=True),
        "platform": sys.platform,
        "system": platform.platform(),
        "python_version": platform.python_version(),
    }


def database_stats():
    stats = {
        "status": "offline",
        "message": "",
        "vendor": connection.vendor,
        "storage": "",
        "size": "-",
        "tables": 0,
        "last_updated": "-",
    }
    try:
        connection.ensure_connection()
        stats["status"] = "online"
    except DatabaseError as e:
        stats["status"] = "error"
        stats["message"] = str(e) or "Unknown error"
        return stats

    if connection.vendor == "sqlite":
        storage = str(connection.settings_dict.get("NAME") or "")
        stats["storage"] = storage
        try:
            stat = os.stat(storage)
            stats["size"] = humanize.naturalsize(stat.st_size, binary=True)
            stats["last_updated"] = datetime.datetime.fromtimestamp(stat.st_mtime).strftime("%Y-%m-%d %H:%M:%S")
        except OSError:
            pass
    try:
        stats["tables"] = len(connection.introspection.table_names())
    except DatabaseError as e:
        logger.warning("Table introspection failed: %s", e)
    return stats


@admin_required
def dashboard(request):
    try:
        context = {
            "products": Product.objects.all(),
            "visitor_map": visitor_map(),
            "access_logs": AccessLog.objects.order_by("-timestamp")[:RECENT_LOG_COUNT],
            "server_stats": server_stats(),
            "db_stats": database_stats(),
            "plugins_updated": request.GET.get("plugins_updated") == "1",
        }
        return render(request, "admin_console/dashboard.html", context)
    except DatabaseError:
        logger.exception("Dashboard failed")
        return HttpResponseServerError("Server Error")
