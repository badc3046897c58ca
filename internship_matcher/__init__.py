"""
Internship Matcher - Scores and ranks internship postings for a student

This package:
1. Scores how well a user's skills cover an internship's requirements
2. Weighs location, work type, interest and industry preferences
3. Explains each match in a few short reasons
4. Ranks a catalog of internships into recommendations
5. Summarizes skill demand and application history as insights
"""

__version__ = "1.0.0"
__author__ = "Internship Matcher"
