import logging
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from website.models import AccessLog, AdminUser, Category, Product, SiteConfig

logger = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "车床系列", "name_en": "Lathes"},
    {"name": "冲压设备", "name_en": "Presses"},
    {"name": "自动化设备", "name_en": "Automation"},
]

PRODUCTS = [
    {
        "name": "CNC精密车床 X-200",
        "name_en": "CNC Precision Lathe X-200",
        "category": "车床系列",
        "category_en": "Lathes",
        "description": "高精度CNC车床，适用于重型工业应用，性能稳定可靠。",
        "description_en": "High precision CNC lathe suitable for heavy duty industrial applications.",
        "features": "高速主轴\n自动换刀系统\n占地面积小",
        "features_en": "High Speed Spindle\nAutomated Tool Changer\nCompact Footprint",
        "image": "",
    },
    {
        "name": "液压机 H-500",
        "name_en": "Hydraulic Press H-500",
        "category": "冲压设备",
        "category_en": "Presses",
        "description": "500吨级液压机，专为金属成型设计，压力控制精确。",
        "description_en": "500-ton hydraulic press for metal forming.",
        "features": "压力精确控制\n安全防护装置\n数字显示屏",
        "features_en": "Pressure Control\nSafety Guards\nDigital Display",
        "image": "",
    },
    {
        "name": "工业机械臂 R-10",
        "name_en": "Industrial Robotic Arm R-10",
        "category": "自动化设备",
        "category_en": "Automation",
        "description": "6轴工业机械臂，适用于组装、焊接等自动化场景。",
        "description_en": "6-axis robotic arm for assembly and welding.",
        "features": "高负载能力\n高精度定位\n编程简单",
        "features_en": "High Payload\nPrecision Accuracy\nEasy Programming",
        "image": "",
    },
]

SAMPLE_ACCESS_LOGS = [
    ("1.2.3.4", "CN", "Beijing", "/"),
    ("8.8.8.8", "US", "Mountain View", "/products"),
    ("5.6.7.8", "DE", "Berlin", "/about"),
    ("9.10.11.12", "JP", "Tokyo", "/contact"),
    ("13.14.15.16", "CN", "Shanghai", "/products/1"),
    ("17.18.19.20", "GB", "London", "/services"),
    ("21.22.23.24", "FR", "Paris", "/"),
    ("25.26.27.28", "IN", "Mumbai", "/products"),
]

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"


class Command(BaseCommand):
    help = "Seed initial site content (contact info, categories, products, admin user) into empty tables."

    def add_arguments(self, parser):
        parser.add_argument(
            "--access-logs",
            action="store_true",
            help="Also append sample access log rows for the dashboard visitor map.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if not SiteConfig.objects.exists():
            SiteConfig.objects.create(key=SiteConfig.CONTACT, **{
                k: v for k, v in SiteConfig.DEFAULTS[SiteConfig.CONTACT].items() if k != "whatsapp"
            })
            self.stdout.write(self.style.SUCCESS("Site config seeded"))

        if not Category.objects.exists():
            Category.objects.bulk_create([Category(**row) for row in CATEGORIES])
            self.stdout.write(self.style.SUCCESS("Categories seeded"))

        if not Product.objects.exists():
            Product.objects.bulk_create([Product(**row) for row in PRODUCTS])
            self.stdout.write(self.style.SUCCESS("Initial products seeded"))

        if not AdminUser.objects.exists():
            admin = AdminUser(username=DEFAULT_ADMIN_USERNAME)
            admin.set_password(DEFAULT_ADMIN_PASSWORD)
            admin.save()
            self.stdout.write(self.style.SUCCESS("Admin user seeded"))

        if options["access_logs"]:
            now = timezone.now()
            AccessLog.objects.bulk_create([
                AccessLog(
                    ip=ip,
                    country=country,
                    city=city,
                    path=path,
                    method="GET",
                    user_agent="Mozilla/5.0 (seed)",
                    timestamp=now - timedelta(hours=i),
                )
                for i, (ip, country, city, path) in enumerate(SAMPLE_ACCESS_LOGS)
            ])
            self.stdout.write(self.style.SUCCESS(f"{len(SAMPLE_ACCESS_LOGS)} sample access logs added"))
        logger.info("Site seed finished")
