"""GST forward/reverse calculator for Indian Rupee amounts."""
