"""Reply-to-the-triggering-message capabilities for aiogram bots."""
