"""Configuration management"""
import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Matching Configuration
    MATCH_METRIC = os.getenv('MATCH_METRIC', 'ngram').lower()
    NGRAM_MAX = int(os.getenv('NGRAM_MAX', 2))
    
    # Display Configuration
    TOP_K = int(os.getenv('TOP_K_COUNT', 5))
    MIN_SCORE = float(os.getenv('MIN_SCORE_THRESHOLD', 0.0))
    RECORD_ID_WIDTH = 4
    NAME_WIDTH = 24
    TOTAL_WIDTH = 10
    
    # Roster columns (when a roster comes in as a DataFrame)
    ROSTER_COLS = {
        'name': os.getenv('ROSTER_NAME_COLUMN', 'name'),
        'student_id': os.getenv('ROSTER_ID_COLUMN', 'student_id')
    }
    
    # Export headers (pasted into a spreadsheet)
    EXPORT_COLS = {
        'record_id': 'Record Id',
        'student_id': 'Student Id',
        'name': 'Name',
        'total': 'Total Marks',
        'item': 'Item {}'
    }
    
    # Input escapes
    EXPORT_COMMAND = ':export'
    CLEAR_COMMAND = ':clear'
