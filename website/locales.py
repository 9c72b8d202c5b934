# UI strings for the public site, keyed by language tag.

LOCALES = {
    "zh": {
        # ====== Site ======
        "company_name": "欧玛机械",
        "tagline": "专业工业机械制造商",
        "footer_rights": "版权所有",
        "switch_language": "English",
        "switch_language_code": "en",

        # ====== Navigation ======
        "nav_home": "首页",
        "nav_products": "产品中心",
        "nav_about": "关于我们",
        "nav_services": "服务与支持",
        "nav_contact": "联系我们",
        "nav_admin": "后台管理",

        # ====== Home ======
        "title_home": "首页",
        "hero_title": "精工制造 值得信赖",
        "hero_subtitle": "为全球客户提供车床、冲压及自动化设备解决方案",
        "featured_products": "推荐产品",
        "view_details": "查看详情",
        "view_all": "查看全部产品",

        # ====== Products ======
        "title_products": "产品中心",
        "all_categories": "全部分类",
        "categories": "产品分类",
        "no_products": "暂无产品",
        "description": "产品描述",
        "features": "产品特点",
        "video": "产品视频",
        "manual": "产品手册",
        "download_manual": "下载手册",
        "gallery": "产品图库",
        "back_to_products": "返回产品列表",
        "inquire_now": "立即咨询",

        # ====== About ======
        "title_about": "关于我们",
        "about_mission": "我们的使命",

        # ====== Contact ======
        "title_contact": "联系我们",
        "address": "地址",
        "phone": "电话",
        "email": "邮箱",
        "work_hours": "工作时间",
        "whatsapp": "WhatsApp",
        "leave_message": "在线留言",
        "form_name": "姓名 / 公司",
        "form_email": "邮箱",
        "form_phone": "电话",
        "form_message": "留言内容",
        "form_submit": "提交",
        "message_success": "留言已提交，我们会尽快与您联系。",
        "message_failed": "留言提交失败，请稍后再试。",

        # ====== Services ======
        "title_services": "服务与支持",
        "resources": "技术资源",
        "resource_manual": "说明书",
        "resource_video": "视频",
        "no_resources": "暂无资源",

        # ====== Chat widget ======
        "chat_title": "在线咨询",
        "chat_intro": "请留下您的联系方式，我们的工程师将为您解答。",
        "chat_company": "公司名称",
        "chat_product": "感兴趣的产品",
        "chat_start": "开始咨询",
        "chat_placeholder": "请输入消息…",
        "chat_send": "发送",
    },
    "en": {
        # ====== Site ======
        "company_name": "Ouma Machinery",
        "tagline": "Professional Industrial Machinery Manufacturer",
        "footer_rights": "All rights reserved",
        "switch_language": "中文",
        "switch_language_code": "zh",

        # ====== Navigation ======
        "nav_home": "Home",
        "nav_products": "Products",
        "nav_about": "About Us",
        "nav_services": "Services & Support",
        "nav_contact": "Contact",
        "nav_admin": "Admin",

        # ====== Home ======
        "title_home": "Home",
        "hero_title": "Precision Manufacturing You Can Trust",
        "hero_subtitle": "Lathes, presses and automation solutions for customers worldwide",
        "featured_products": "Featured Products",
        "view_details": "View Details",
        "view_all": "View All Products",

        # ====== Products ======
        "title_products": "Products",
        "all_categories": "All Categories",
        "categories": "Categories",
        "no_products": "No products yet",
        "description": "Description",
        "features": "Features",
        "video": "Product Video",
        "manual": "Manual",
        "download_manual": "Download Manual",
        "gallery": "Gallery",
        "back_to_products": "Back to Products",
        "inquire_now": "Inquire Now",

        # ====== About ======
        "title_about": "About Us",
        "about_mission": "Our Mission",

        # ====== Contact ======
        "title_contact": "Contact Us",
        "address": "Address",
        "phone": "Phone",
        "email": "Email",
        "work_hours": "Working Hours",
        "whatsapp": "WhatsApp",
        "leave_message": "Leave a Message",
        "form_name": "Name / Company",
        "form_email": "Email",
        "form_phone": "Phone",
        "form_message": "Message",
        "form_submit": "Submit",
        "message_success": "Your message has been sent. We will contact you soon.",
        "message_failed": "Sending failed, please try again later.",

        # ====== Services ======
        "title_services": "Services & Support",
        "resources": "Technical Resources",
        "resource_manual": "Manual",
        "resource_video": "Video",
        "no_resources": "No resources yet",

        # ====== Chat widget ======
        "chat_title": "Online Inquiry",
        "chat_intro": "Leave your contact details and our engineers will get back to you.",
        "chat_company": "Company",
        "chat_product": "Product of Interest",
        "chat_start": "Start Chat",
        "chat_placeholder": "Type a message…",
        "chat_send": "Send",
    },
}
