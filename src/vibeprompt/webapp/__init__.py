"""Django relay that forwards chat-completion requests with a server-held credential."""
