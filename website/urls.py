from django.urls import path

from . import chat, home_page, product, site_details, support

urlpatterns = [
    path('', home_page.home, name='home'),
    path('products', product.product_list, name='products'),
    path('products/<int:pk>', product.product_detail, name='product_detail'),
    path('about', site_details.about, name='about'),
    path('contact', site_details.contact, name='contact'),
    path('contact/message', chat.contact_message, name='contact_message'),
    path('services', support.services, name='services'),

    # Chat widget (JSON)
    path('chat/start', chat.ChatStartAPIView.as_view(), name='chat_start'),
    path('chat/messages', chat.ChatMessagesAPIView.as_view(), name='chat_messages'),
    path('chat/message', chat.ChatMessageAPIView.as_view(), name='chat_message'),
]
