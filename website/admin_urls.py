from django.urls import path

from . import auth_views, category, chat, dashboard, home_page, plugins, product, site_details, support

urlpatterns = [
    path('', auth_views.admin_root),
    path('login', auth_views.login, name='admin_login'),
    path('logout', auth_views.logout, name='admin_logout'),
    path('account', auth_views.account, name='admin_account'),
    path('dashboard', dashboard.dashboard, name='admin_dashboard'),

    # Products
    path('products', product.admin_products, name='admin_products'),
    path('product/add', product.product_add, name='admin_product_add'),
    path('product/edit/<int:pk>', product.product_edit, name='admin_product_edit'),
    path('product/delete/<int:pk>', product.product_delete, name='admin_product_delete'),
    path('product/image/delete/<int:pk>', product.product_image_delete, name='admin_product_image_delete'),

    # Categories
    path('categories', category.admin_categories, name='admin_categories'),
    path('categories/add', category.category_add, name='admin_category_add'),
    path('categories/update/<int:pk>', category.category_update, name='admin_category_update'),
    path('categories/delete/<int:pk>', category.category_delete, name='admin_category_delete'),

    # Carousel
    path('carousel', home_page.admin_carousel, name='admin_carousel'),
    path('carousel/add', home_page.carousel_add, name='admin_carousel_add'),
    path('carousel/edit/<int:pk>', home_page.carousel_edit, name='admin_carousel_edit'),
    path('carousel/resize/<int:pk>', home_page.carousel_resize, name='admin_carousel_resize'),
    path('carousel/delete/<int:pk>', home_page.carousel_delete, name='admin_carousel_delete'),

    # Support resources
    path('support', support.admin_support, name='admin_support'),
    path('support/add', support.support_add, name='admin_support_add'),
    path('support/delete/<int:pk>', support.support_delete, name='admin_support_delete'),

    # Site content
    path('contact', site_details.admin_contact, name='admin_contact'),
    path('about', site_details.admin_about, name='admin_about'),
    path('services', site_details.admin_services, name='admin_services'),

    # Chat
    path('chat', chat.admin_chat, name='admin_chat'),
    path('chat/<int:pk>', chat.admin_chat, name='admin_chat_session'),
    path('chat/<int:pk>/message', chat.admin_chat_message, name='admin_chat_message'),
    path('chat/<int:pk>/messages', chat.AdminChatMessagesAPIView.as_view(), name='admin_chat_messages'),

    # Plugins
    path('plugins', plugins.admin_plugins, name='admin_plugins'),
    path('plugins/update-all', plugins.plugins_update_all, name='admin_plugins_update_all'),
    path('plugins/update/<str:name>', plugins.plugins_update, name='admin_plugins_update'),
    path('plugins/audit-fix', plugins.plugins_audit_fix, name='admin_plugins_audit_fix'),
    path('system/update-plugins', plugins.system_update_plugins, name='admin_system_update_plugins'),
]
