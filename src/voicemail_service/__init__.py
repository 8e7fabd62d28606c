"""Voicemail intake service: stores recorded audio and notifies an operator."""
