"""Fixed content pools for the room mini-games."""

QUIZ_QUESTIONS = [
    {'text': 'What is the capital of France?', 'options': ['London', 'Berlin', 'Paris', 'Madrid'], 'correct': 2},
    {'text': 'What is the largest planet in the Solar System?', 'options': ['Earth', 'Mars', 'Jupiter', 'Saturn'], 'correct': 2},
    {'text': 'Who painted the Mona Lisa?', 'options': ['Van Gogh', 'Da Vinci', 'Picasso', 'Michelangelo'], 'correct': 1},
    {'text': 'How much is 2 + 2?', 'options': ['3', '4', '5', '6'], 'correct': 1},
    {'text': "Which chemical element has the symbol 'O'?", 'options': ['Gold', 'Oxygen', 'Osmium', 'Silver'], 'correct': 1},
    {'text': 'In which year did humans first walk on the moon?', 'options': ['1959', '1969', '1979', '1989'], 'correct': 1},
    {'text': 'What is the largest mammal in the world?', 'options': ['African elephant', 'Blue whale', 'Giraffe', 'Rhinoceros'], 'correct': 1},
    {'text': "Who wrote 'Dom Casmurro'?", 'options': ['Machado de Assis', 'José de Alencar', 'Clarice Lispector', 'Jorge Amado'], 'correct': 0},
    {'text': 'Which country is known as the land of the rising sun?', 'options': ['China', 'South Korea', 'Japan', 'Thailand'], 'correct': 2},
    {'text': 'How many states does Brazil have?', 'options': ['24', '25', '26', '27'], 'correct': 2},
    {'text': "What colour is an airplane's black box?", 'options': ['Black', 'Orange', 'Red', 'Yellow'], 'correct': 1},
    {'text': "What is a 'bit' in computing?", 'options': ['A program', 'A hardware part', 'A binary digit', 'A virus'], 'correct': 2},
]

TRUTH_DARE = [
    'Truth: What is the most embarrassing thing you have ever done?',
    'Dare: Imitate a chicken for 10 seconds.',
    'Truth: What is your biggest fear?',
    'Dare: Tell a bad joke.',
    'Truth: Who was your first love?',
    'Dare: Do 10 jumping jacks right now.',
    'Truth: If you could be invisible for a day, what would you do?',
    'Dare: Let someone in the group style your hair in a crazy way.',
    'Truth: What was the last lie you told?',
    'Dare: Speak with a foreign accent for the next 3 rounds.',
    'Truth: What would you change about your body if you could?',
    "Dare: Dance the 'Macarena' without music.",
    'Truth: Have you ever fallen for someone at work or school?',
    'Dare: Try to lick your own elbow.',
    'Truth: What is your musical guilty pleasure?',
    'Dare: Post a funny photo of yourself to your story now (or show it to the group).',
]

NEVER_HAVE_I_EVER = [
    'Never have I ever: travelled abroad.',
    'Never have I ever: broken a bone.',
    'Never have I ever: lied to skip work or school.',
    'Never have I ever: eaten food that fell on the floor.',
    'Never have I ever: stayed awake for 24 hours straight.',
    'Never have I ever: used Tinder or a dating app.',
    'Never have I ever: kissed someone and regretted it immediately.',
    'Never have I ever: been sent out of the classroom.',
    'Never have I ever: sung in the shower thinking nobody was listening.',
    'Never have I ever: texted an ex while drunk.',
    'Never have I ever: taken something from a hotel (shampoo, towel...).',
    'Never have I ever: pretended to be sick to avoid going out.',
    'Never have I ever: googled my own name.',
    'Never have I ever: left home without underwear.',
]

POOLS = {
    'quiz': QUIZ_QUESTIONS,
    'truth_dare': TRUTH_DARE,
    'never_have_i_ever': NEVER_HAVE_I_EVER,
}
