from django.db import models
from django.contrib.auth.hashers import make_password, check_password
from django.utils import timezone


class Category(models.Model):
    name = models.CharField(max_length=255, db_index=True)
    name_en = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name


class Product(models.Model):
    # Native (Chinese) fields
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, null=True)
    features = models.TextField(blank=True, null=True)

    # English fields
    name_en = models.CharField(max_length=255, blank=True, null=True)
    category_en = models.CharField(max_length=255, blank=True, null=True)
    description_en = models.TextField(blank=True, null=True)
    features_en = models.TextField(blank=True, null=True)

    # Media, stored as root-relative paths ("/images/...") or a URL
    image = models.CharField(max_length=255, blank=True, null=True)
    video = models.CharField(max_length=255, blank=True, null=True)
    video_url = models.CharField(max_length=500, blank=True, null=True)
    manual = models.CharField(max_length=255, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name


class ProductImage(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="images")
    image = models.CharField(max_length=255)
    is_main = models.BooleanField(default=False)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["product", "is_main"], name="product_image_main_idx"),
        ]

    def __str__(self):
        return f"{self.product_id}:{self.image}"


class CarouselImage(models.Model):
    image = models.CharField(max_length=255)
    title = models.CharField(max_length=255, blank=True, null=True)
    caption = models.CharField(max_length=255, blank=True, null=True)

    def __str__(self):
        return self.title or self.image


class SiteConfig(models.Model):
    CONTACT = "contact_info"
    ABOUT = "about_info"
    SERVICES = "services_info"

    key = models.CharField(max_length=50, unique=True)

    # Contact info
    address_zh = models.CharField(max_length=255, blank=True, null=True)
    address_en = models.CharField(max_length=255, blank=True, null=True)
    phone = models.CharField(max_length=100, blank=True, null=True)
    email = models.CharField(max_length=255, blank=True, null=True)
    work_hours_zh = models.CharField(max_length=255, blank=True, null=True)
    work_hours_en = models.CharField(max_length=255, blank=True, null=True)
    whatsapp = models.CharField(max_length=100, blank=True, null=True)

    # About page
    about_lead_zh = models.TextField(blank=True, null=True)
    about_lead_en = models.TextField(blank=True, null=True)
    about_desc_zh = models.TextField(blank=True, null=True)
    about_desc_en = models.TextField(blank=True, null=True)
    about_mission_zh = models.CharField(max_length=255, blank=True, null=True)
    about_mission_en = models.CharField(max_length=255, blank=True, null=True)
    about_stats_exp_zh = models.CharField(max_length=255, blank=True, null=True)
    about_stats_exp_en = models.CharField(max_length=255, blank=True, null=True)
    about_stats_export_zh = models.CharField(max_length=255, blank=True, null=True)
    about_stats_export_en = models.CharField(max_length=255, blank=True, null=True)
    about_stats_team_zh = models.CharField(max_length=255, blank=True, null=True)
    about_stats_team_en = models.CharField(max_length=255, blank=True, null=True)

    # Services & support page
    services_title_zh = models.CharField(max_length=255, blank=True, null=True)
    services_title_en = models.CharField(max_length=255, blank=True, null=True)
    services_content_zh = models.TextField(blank=True, null=True)
    services_content_en = models.TextField(blank=True, null=True)

    FIELDS_BY_KEY = {
        CONTACT: (
            "address_zh", "address_en", "phone", "email",
            "work_hours_zh", "work_hours_en", "whatsapp",
        ),
        ABOUT: (
            "about_lead_zh", "about_lead_en",
            "about_desc_zh", "about_desc_en",
            "about_mission_zh", "about_mission_en",
            "about_stats_exp_zh", "about_stats_exp_en",
            "about_stats_export_zh", "about_stats_export_en",
            "about_stats_team_zh", "about_stats_team_en",
        ),
        SERVICES: (
            "services_title_zh", "services_title_en",
            "services_content_zh", "services_content_en",
        ),
    }

    DEFAULTS = {
        CONTACT: {
            "address_zh": "中国某市工业园区88号",
            "address_en": "88 Industry Park, Some City, China",
            "phone": "400-123-4567",
            "email": "info@oumamachinery.com",
            "work_hours_zh": "周一至周五: 9:00 - 18:00",
            "work_hours_en": "Mon-Fri: 9:00 - 18:00",
            "whatsapp": "+8613800000000",
        },
        ABOUT: {
            "about_lead_zh": "欧玛机械致力于为全球客户提供高品质的工业机械设备。",
            "about_lead_en": "Ouma Machinery is dedicated to providing high quality industrial machinery to customers worldwide.",
            "about_desc_zh": "我们专注于车床、冲压设备和自动化设备的研发与制造，拥有完善的质量管理体系和售后服务网络。",
            "about_desc_en": "We focus on the research, development and manufacture of lathes, presses and automation equipment, backed by a complete quality system and after-sales network.",
            "about_mission_zh": "以精工制造，助力客户成功。",
            "about_mission_en": "Precision manufacturing for our customers' success.",
            "about_stats_exp_zh": "20年行业经验",
            "about_stats_exp_en": "20 Years Experience",
            "about_stats_export_zh": "出口50多个国家",
            "about_stats_export_en": "Exported to 50+ Countries",
            "about_stats_team_zh": "200多名专业员工",
            "about_stats_team_en": "200+ Professionals",
        },
        SERVICES: {
            "services_title_zh": "服务与支持",
            "services_title_en": "Services & Support",
            "services_content_zh": "如需服务与支持，请通过电话或邮箱联系我们。",
            "services_content_en": "For service and support, please contact us via phone or email.",
        },
    }

    def __str__(self):
        return self.key

    @classmethod
    def load(cls, key):
        """
        Return the stored record for `key`, or an unsaved instance filled
        with the defaults of that key when none exists yet.
        """
        config = cls.objects.filter(key=key).first()
        if config is None:
            config = cls(key=key, **cls.DEFAULTS.get(key, {}))
        return config

    @classmethod
    def upsert(cls, key, data):
        """Write exactly the fields belonging to `key`; other columns stay untouched."""
        values = {field: data.get(field) for field in cls.FIELDS_BY_KEY[key]}
        config, _ = cls.objects.update_or_create(key=key, defaults=values)
        return config


class SupportResource(models.Model):
    TYPE_MANUAL = "manual"
    TYPE_VIDEO = "video"
    TYPE_CHOICES = [(TYPE_MANUAL, "Manual"), (TYPE_VIDEO, "Video")]

    title_zh = models.CharField(max_length=255, blank=True, null=True)
    title_en = models.CharField(max_length=255, blank=True, null=True)
    description_zh = models.TextField(blank=True, null=True)
    description_en = models.TextField(blank=True, null=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    file_path = models.CharField(max_length=255, blank=True, null=True)
    video_path = models.CharField(max_length=255, blank=True, null=True)

    def __str__(self):
        return self.title_zh or self.title_en or f"resource-{self.pk}"


class ChatSession(models.Model):
    company = models.CharField(max_length=255, blank=True, null=True)
    interested_product = models.CharField(max_length=255, blank=True, null=True)
    phone = models.CharField(max_length=100, blank=True, null=True)
    email = models.CharField(max_length=255, blank=True, null=True)
    status = models.CharField(max_length=20, default="open")
    started_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-started_at"]

    def __str__(self):
        return f"{self.company or 'visitor'} ({self.pk})"


class ChatMessage(models.Model):
    SENDER_VISITOR = "visitor"
    SENDER_ADMIN = "admin"
    SENDER_CHOICES = [(SENDER_VISITOR, "Visitor"), (SENDER_ADMIN, "Admin")]

    session = models.ForeignKey(ChatSession, on_delete=models.CASCADE, related_name="messages")
    sender = models.CharField(max_length=20, choices=SENDER_CHOICES)
    content = models.TextField()
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["timestamp", "id"]

    def __str__(self):
        return f"[{self.sender}] {self.content[:40]}"


class AccessLog(models.Model):
    ip = models.CharField(max_length=64, blank=True, default="")
    country = models.CharField(max_length=8, blank=True, default="", db_index=True)
    city = models.CharField(max_length=255, blank=True, default="")
    path = models.CharField(max_length=2048)
    method = models.CharField(max_length=10)
    user_agent = models.CharField(max_length=512, blank=True, default="")
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-timestamp"]

    def __str__(self):
        return f"{self.method} {self.path} ({self.ip})"


class AdminUser(models.Model):
    username = models.CharField(max_length=150, unique=True)
    password_hash = models.CharField(max_length=255)

    def __str__(self):
        return self.username

    def set_password(self, raw_password):
        self.password_hash = make_password(raw_password)

    def check_password(self, raw_password):
        if not raw_password or not self.password_hash:
            return False
        return check_password(raw_password, self.password_hash)
