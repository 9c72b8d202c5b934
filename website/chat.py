# Standard Library
import logging

# Django
from django.db import DatabaseError, transaction
from django.http import HttpResponseServerError
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

# Django REST Framework
from rest_framework import status
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

# Local Imports
from .models import ChatMessage, ChatSession
from .permissions import AdminSessionPermission, admin_required

logger = logging.getLogger(__name__)

CHAT_SESSION_KEY = "chat_session_id"


def _message_dict(message):
    return {
        "id": message.id,
        "session_id": message.session_id,
        "sender": message.sender,
        "content": message.content,
        "timestamp": message.timestamp.isoformat(),
    }


def session_messages(session_id):
    """Messages of a chat session, oldest first."""
    return ChatMessage.objects.filter(session_id=session_id).order_by("timestamp", "id")


def post_visitor_message(session_id, content):
    """Append a visitor message; returns None when there is no session or no content."""
    content = (content or "").strip()
    if not session_id or not content:
        return None
    if not ChatSession.objects.filter(pk=session_id).exists():
        return None
    return ChatMessage.objects.create(session_id=session_id, sender=ChatMessage.SENDER_VISITOR, content=content)


# ---- Public: contact form ----

@require_POST
def contact_message(request):
    data = request.POST
    message = (data.get("message") or "").strip()
    if not message:
        return redirect("/contact?message_success=0")
    try:
        with transaction.atomic():
            session = ChatSession.objects.create(
                company=data.get("name", ""),
                interested_product="",
                phone=data.get("phone", ""),
                email=data.get("email", ""),
            )
            ChatMessage.objects.create(session=session, sender=ChatMessage.SENDER_VISITOR, content=message)
    except DatabaseError:
        logger.exception("Saving contact message failed")
        return redirect("/contact?message_success=0")
    request.session[CHAT_SESSION_KEY] = session.id
    return redirect("/contact?message_success=1")


# ---- Public: chat widget (JSON) ----

class ChatStartAPIView(APIView):
    authentication_classes = []
    renderer_classes = [JSONRenderer]

    def post(self, request):
        data = request.data
        try:
            session = ChatSession.objects.create(
                company=data.get("company", ""),
                interested_product=data.get("interested_product", ""),
                phone=data.get("phone", ""),
                email=data.get("email", ""),
            )
        except DatabaseError:
            logger.exception("ChatStart failed")
            return Response({"ok": False}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        request.session[CHAT_SESSION_KEY] = session.id
        return Response({"ok": True, "sessionId": session.id}, status=status.HTTP_200_OK)


class ChatMessagesAPIView(APIView):
    authentication_classes = []
    renderer_classes = [JSONRenderer]

    def get(self, request):
        session_id = request.session.get(CHAT_SESSION_KEY)
        if not session_id:
            return Response({"ok": True, "messages": []}, status=status.HTTP_200_OK)
        try:
            messages = [_message_dict(m) for m in session_messages(session_id)]
        except DatabaseError:
            logger.exception("ChatMessages failed for session %s", session_id)
            return Response({"ok": False, "messages": []}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response({"ok": True, "messages": messages}, status=status.HTTP_200_OK)


class ChatMessageAPIView(APIView):
    authentication_classes = []
    renderer_classes = [JSONRenderer]

    def post(self, request):
        session_id = request.session.get(CHAT_SESSION_KEY)
        try:
            message = post_visitor_message(session_id, request.data.get("content"))
        except DatabaseError:
            logger.exception("ChatMessage failed for session %s", session_id)
            return Response({"ok": False}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response({"ok": message is not None}, status=status.HTTP_200_OK)


# ---- Admin ----

@admin_required
def admin_chat(request, pk=None):
    try:
        sessions = ChatSession.objects.order_by("-started_at")
        current = ChatSession.objects.filter(pk=pk).first() if pk is not None else None
        messages = list(session_messages(pk)) if current else []
        return render(request, "admin_console/chat.html", {
            "sessions": sessions,
            "current": current,
            "messages": messages,
        })
    except DatabaseError:
        logger.exception("Loading chat %s failed", pk)
        return HttpResponseServerError("Error loading chat")


@admin_required
@require_POST
def admin_chat_message(request, pk):
    content = (request.POST.get("content") or "").strip()
    try:
        if content and ChatSession.objects.filter(pk=pk).exists():
            ChatMessage.objects.create(session_id=pk, sender=ChatMessage.SENDER_ADMIN, content=content)
    except DatabaseError:
        logger.exception("Sending admin message to chat %s failed", pk)
        return HttpResponseServerError("Error sending message")
    return redirect(f"/admin/chat/{pk}")


class AdminChatMessagesAPIView(APIView):
    """Polled by the admin chat page to refresh the open conversation."""
    authentication_classes = []
    permission_classes = [AdminSessionPermission]
    renderer_classes = [JSONRenderer]

    def get(self, request, pk):
        try:
            messages = [_message_dict(m) for m in session_messages(pk)]
        except DatabaseError:
            logger.exception("AdminChatMessages failed for session %s", pk)
            return Response({"ok": False, "messages": []}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response({"ok": True, "messages": messages}, status=status.HTTP_200_OK)
