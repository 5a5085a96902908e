"""Hackathon participation API backed by Firebase Authentication and Cloud Firestore."""
