"""
WebSocket Package

Flask-SocketIO handlers for pushing room state to subscribed clients.
"""
