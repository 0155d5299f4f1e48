# app/content/questions.py
"""
Banque de questions de l'évaluation Genius Factor.

Part → Section → Question (4 parties, 62 questions).
Données statiques : jamais créées ni modifiées à l'exécution.
Les ids sont uniques et stables sur toute la banque.

Parties I à III : options A) → D).
Partie IV (Genius Factor Mapping) : options A) → I).

Appelé par : engine/assessment/navigator.py, modules/assessment/service.py
"""
from typing import Dict, List

QUESTION_BANK: List[Dict] = [
    {
        "part": "Part I: Self-Awareness Audit Questions",
        "sections": [
            {
                "section": "Section A: Energy and Motivation Patterns",
                "questions": [
                    {
                        "id": 1,
                        "type": "multiple-choice",
                        "question": "When facing a challenging project at work, which scenario energizes you most?",
                        "options": [
                            "A) Breaking down complex problems into logical, step-by-step solutions",
                            "B) Collaborating with team members to brainstorm creative approaches",
                            "C) Visualizing the end result and designing the overall framework",
                            "D) Finding ways to make the project meaningful and purposeful"
                        ],
                        "category": "Energy and Motivation"
                    },
                    {
                        "id": 2,
                        "type": "multiple-choice",
                        "question": "At the end of a fulfilling workday, you most likely spent time:",
                        "options": [
                            "A) Analyzing data or solving technical problems",
                            "B) Building relationships and helping colleagues",
                            "C) Creating, designing, or improving visual elements",
                            "D) Writing, communicating, or sharing ideas"
                        ],
                        "category": "Energy and Motivation"
                    },
                    {
                        "id": 3,
                        "type": "multiple-choice",
                        "question": "When you were a child, you were most drawn to activities that involved:",
                        "options": [
                            "A) Taking things apart to see how they worked",
                            "B) Organizing games and bringing people together",
                            "C) Drawing, building, or creating with your hands",
                            "D) Reading, storytelling, or performing"
                        ],
                        "category": "Energy and Motivation"
                    },
                    {
                        "id": 4,
                        "type": "multiple-choice",
                        "question": "In team meetings, you naturally tend to:",
                        "options": [
                            "A) Focus on the logical flow and practical implementation",
                            "B) Ensure everyone's voice is heard and build consensus",
                            "C) Sketch out ideas or create visual representations",
                            "D) Ask deeper questions about purpose and meaning"
                        ],
                        "category": "Energy and Motivation"
                    },
                    {
                        "id": 5,
                        "type": "multiple-choice",
                        "question": "When learning something new, you prefer to:",
                        "options": [
                            "A) Study the technical specifications and understand the mechanics",
                            "B) Learn through discussion and interaction with others",
                            "C) See demonstrations and visual examples",
                            "D) Understand the broader context and philosophical implications"
                        ],
                        "category": "Energy and Motivation"
                    }
                ]
            },
            {
                "section": "Section B: Work Environment Preferences",
                "questions": [
                    {
                        "id": 6,
                        "type": "multiple-choice",
                        "question": "Your ideal work environment would:",
                        "options": [
                            "A) Provide quiet space for deep analysis and problem-solving",
                            "B) Encourage collaboration and frequent team interaction",
                            "C) Offer creative freedom and aesthetic inspiration",
                            "D) Connect to a larger mission and meaningful purpose"
                        ],
                        "category": "Work Environment"
                    },
                    {
                        "id": 7,
                        "type": "multiple-choice",
                        "question": "When given a choice of projects, you gravitate toward:",
                        "options": [
                            "A) Technical challenges that require systematic thinking",
                            "B) People-centered initiatives that build community",
                            "C) Creative projects that involve design or visual elements",
                            "D) Mission-driven work that creates positive impact"
                        ],
                        "category": "Work Environment"
                    },
                    {
                        "id": 8,
                        "type": "multiple-choice",
                        "question": "You feel most confident when:",
                        "options": [
                            "A) Working with data, numbers, or logical systems",
                            "B) Facilitating relationships and team dynamics",
                            "C) Creating something visually appealing or innovative",
                            "D) Contributing to something larger than yourself"
                        ],
                        "category": "Work Environment"
                    },
                    {
                        "id": 9,
                        "type": "multiple-choice",
                        "question": "During your most productive work periods, you're typically:",
                        "options": [
                            "A) Analyzing patterns and optimizing processes",
                            "B) Connecting with people and building networks",
                            "C) Designing, creating, or improving visual experiences",
                            "D) Reflecting on deeper meaning and long-term impact"
                        ],
                        "category": "Work Environment"
                    },
                    {
                        "id": 10,
                        "type": "multiple-choice",
                        "question": "When facing workplace stress, you recover best by:",
                        "options": [
                            "A) Organizing your thoughts and creating systematic plans",
                            "B) Talking through challenges with trusted colleagues",
                            "C) Engaging in creative activities or changing your environment",
                            "D) Taking time for reflection and reconnecting with your values"
                        ],
                        "category": "Work Environment"
                    }
                ]
            },
            {
                "section": "Section C: Natural Response Patterns",
                "questions": [
                    {
                        "id": 11,
                        "type": "multiple-choice",
                        "question": "When someone asks for your help, your first instinct is to:",
                        "options": [
                            "A) Analyze their problem and provide logical solutions",
                            "B) Listen empathetically and offer emotional support",
                            "C) Help them visualize possibilities and creative alternatives",
                            "D) Explore the deeper meaning and long-term implications"
                        ],
                        "category": "Response Patterns"
                    },
                    {
                        "id": 12,
                        "type": "multiple-choice",
                        "question": "In group settings, others often look to you to:",
                        "options": [
                            "A) Provide technical expertise and analytical thinking",
                            "B) Facilitate discussion and maintain group harmony",
                            "C) Generate creative ideas and innovative solutions",
                            "D) Offer wisdom and perspective on important decisions"
                        ],
                        "category": "Response Patterns"
                    },
                    {
                        "id": 13,
                        "type": "multiple-choice",
                        "question": "When you disagree with a decision at work, you're most likely to:",
                        "options": [
                            "A) Present data and logical arguments for your position",
                            "B) Seek to understand different perspectives and find compromise",
                            "C) Propose alternative approaches or creative solutions",
                            "D) Question whether the decision aligns with core values and purpose"
                        ],
                        "category": "Response Patterns"
                    },
                    {
                        "id": 14,
                        "type": "multiple-choice",
                        "question": "Your colleagues would describe your communication style as:",
                        "options": [
                            "A) Precise, logical, and detail-oriented",
                            "B) Warm, inclusive, and relationship-focused",
                            "C) Creative, visual, and innovative",
                            "D) Thoughtful, meaningful, and purpose-driven"
                        ],
                        "category": "Response Patterns"
                    },
                    {
                        "id": 15,
                        "type": "multiple-choice",
                        "question": "When celebrating a team success, you most value:",
                        "options": [
                            "A) Recognition for technical excellence and problem-solving",
                            "B) Acknowledgment of collaborative effort and team building",
                            "C) Appreciation for creative contribution and innovation",
                            "D) Understanding of the meaningful impact created"
                        ],
                        "category": "Response Patterns"
                    }
                ]
            },
            {
                "section": "Section D: Decision-Making Patterns",
                "questions": [
                    {
                        "id": 16,
                        "type": "multiple-choice",
                        "question": "When making important career decisions, you prioritize:",
                        "options": [
                            "A) Logical analysis of pros, cons, and potential outcomes",
                            "B) Input from trusted mentors, colleagues, and family",
                            "C) Gut instinct and creative vision for possibilities",
                            "D) Alignment with personal values and life purpose"
                        ],
                        "category": "Decision Making"
                    },
                    {
                        "id": 17,
                        "type": "multiple-choice",
                        "question": "You feel most satisfied with a decision when:",
                        "options": [
                            "A) You've thoroughly researched and analyzed all options",
                            "B) You've considered the impact on relationships and team dynamics",
                            "C) You've explored creative alternatives and innovative approaches",
                            "D) You've ensured alignment with your deeper values and meaning"
                        ],
                        "category": "Decision Making"
                    },
                    {
                        "id": 18,
                        "type": "multiple-choice",
                        "question": "When facing uncertainty at work, you tend to:",
                        "options": [
                            "A) Gather more data and create systematic plans",
                            "B) Seek advice and support from your network",
                            "C) Brainstorm creative solutions and alternative approaches",
                            "D) Reflect on core principles and long-term vision"
                        ],
                        "category": "Decision Making"
                    },
                    {
                        "id": 19,
                        "type": "multiple-choice",
                        "question": "Your approach to risk-taking is:",
                        "options": [
                            "A) Calculated and based on thorough analysis",
                            "B) Collaborative, seeking input from others",
                            "C) Intuitive and driven by creative possibilities",
                            "D) Values-based and aligned with personal mission"
                        ],
                        "category": "Decision Making"
                    },
                    {
                        "id": 20,
                        "type": "multiple-choice",
                        "question": "When evaluating job opportunities, your primary consideration is:",
                        "options": [
                            "A) Technical challenges and growth in expertise",
                            "B) Team culture and relationship opportunities",
                            "C) Creative freedom and innovative potential",
                            "D) Mission alignment and meaningful impact"
                        ],
                        "category": "Decision Making"
                    }
                ]
            }
        ]
    },
    {
        "part": "Part II: Talent Audit Questions",
        "sections": [
            {
                "section": "Section A: Natural Abilities Recognition",
                "questions": [
                    {
                        "id": 21,
                        "type": "multiple-choice",
                        "question": "Which of these activities have you always found surprisingly easy compared to your peers?",
                        "options": [
                            "A) Understanding complex systems and how they interconnect",
                            "B) Reading people's emotions and responding appropriately",
                            "C) Seeing spatial relationships and design possibilities",
                            "D) Finding the right words to express complex ideas"
                        ],
                        "category": "Natural Abilities"
                    },
                    {
                        "id": 22,
                        "type": "multiple-choice",
                        "question": "When others compliment your work, they most often praise your:",
                        "options": [
                            "A) Analytical thinking and problem-solving abilities",
                            "B) Ability to bring people together and create harmony",
                            "C) Creative vision and innovative approaches",
                            "D) Communication skills and meaningful insights"
                        ],
                        "category": "Natural Abilities"
                    },
                    {
                        "id": 23,
                        "type": "multiple-choice",
                        "question": "In school, you consistently excelled in subjects that involved:",
                        "options": [
                            "A) Mathematics, science, or logical reasoning",
                            "B) Group projects, presentations, or interpersonal activities",
                            "C) Art, design, or hands-on creation",
                            "D) Writing, literature, or philosophical discussion"
                        ],
                        "category": "Natural Abilities"
                    },
                    {
                        "id": 24,
                        "type": "multiple-choice",
                        "question": "When learning new skills, you pick up quickly on:",
                        "options": [
                            "A) Technical processes and systematic approaches",
                            "B) Social dynamics and relationship patterns",
                            "C) Visual patterns and creative techniques",
                            "D) Conceptual frameworks and deeper meanings"
                        ],
                        "category": "Natural Abilities"
                    },
                    {
                        "id": 25,
                        "type": "multiple-choice",
                        "question": "Your friends and family often ask for your help with:",
                        "options": [
                            "A) Technical problems or analytical challenges",
                            "B) Relationship advice or social situations",
                            "C) Creative projects or design decisions",
                            "D) Important life decisions or meaningful conversations"
                        ],
                        "category": "Natural Abilities"
                    }
                ]
            },
            {
                "section": "Section B: Effortless Excellence Patterns",
                "questions": [
                    {
                        "id": 26,
                        "type": "multiple-choice",
                        "question": "You tend to lose track of time when:",
                        "options": [
                            "A) Solving complex problems or analyzing data",
                            "B) Having deep conversations or helping others",
                            "C) Creating, building, or designing something",
                            "D) Writing, reading, or exploring ideas"
                        ],
                        "category": "Effortless Excellence"
                    },
                    {
                        "id": 27,
                        "type": "multiple-choice",
                        "question": "In group projects, you naturally take on the role of:",
                        "options": [
                            "A) The analyst who breaks down complex problems",
                            "B) The facilitator who ensures everyone contributes",
                            "C) The innovator who generates creative solutions",
                            "D) The communicator who articulates the vision"
                        ],
                        "category": "Effortless Excellence"
                    },
                    {
                        "id": 28,
                        "type": "multiple-choice",
                        "question": "When facing a new challenge, your first strength is:",
                        "options": [
                            "A) Breaking it down into manageable, logical steps",
                            "B) Understanding how it affects people and relationships",
                            "C) Visualizing creative solutions and possibilities",
                            "D) Connecting it to larger purposes and meanings"
                        ],
                        "category": "Effortless Excellence"
                    },
                    {
                        "id": 29,
                        "type": "multiple-choice",
                        "question": "Others seek you out because you're naturally good at:",
                        "options": [
                            "A) Providing logical analysis and systematic solutions",
                            "B) Creating connections and building relationships",
                            "C) Generating innovative ideas and creative approaches",
                            "D) Offering perspective and meaningful guidance"
                        ],
                        "category": "Effortless Excellence"
                    },
                    {
                        "id": 30,
                        "type": "multiple-choice",
                        "question": "Your most consistent feedback from supervisors highlights your:",
                        "options": [
                            "A) Technical competence and analytical skills",
                            "B) Interpersonal abilities and team collaboration",
                            "C) Creative thinking and innovative contributions",
                            "D) Communication excellence and strategic thinking"
                        ],
                        "category": "Effortless Excellence"
                    }
                ]
            },
            {
                "section": "Section C: Instinctive Responses",
                "questions": [
                    {
                        "id": 31,
                        "type": "multiple-choice",
                        "question": "When you walk into a new workplace, you immediately notice:",
                        "options": [
                            "A) How efficiently systems and processes are organized",
                            "B) The quality of relationships and team dynamics",
                            "C) The visual environment and design elements",
                            "D) Whether the culture aligns with meaningful values"
                        ],
                        "category": "Instinctive Responses"
                    },
                    {
                        "id": 32,
                        "type": "multiple-choice",
                        "question": "In meetings, you instinctively:",
                        "options": [
                            "A) Focus on data, facts, and logical conclusions",
                            "B) Pay attention to group dynamics and individual contributions",
                            "C) Think about visual ways to represent ideas",
                            "D) Consider the broader implications and deeper meaning"
                        ],
                        "category": "Instinctive Responses"
                    },
                    {
                        "id": 33,
                        "type": "multiple-choice",
                        "question": "When someone presents a problem to you, you automatically:",
                        "options": [
                            "A) Start analyzing the logical components and relationships",
                            "B) Consider how it affects the people involved",
                            "C) Begin visualizing alternative solutions",
                            "D) Explore the underlying values and principles at stake"
                        ],
                        "category": "Instinctive Responses"
                    },
                    {
                        "id": 34,
                        "type": "multiple-choice",
                        "question": "Your natural approach to improvement is:",
                        "options": [
                            "A) Systematic analysis and process optimization",
                            "B) Gathering input from stakeholders and building consensus",
                            "C) Experimenting with creative alternatives",
                            "D) Ensuring alignment with core values and purpose"
                        ],
                        "category": "Instinctive Responses"
                    },
                    {
                        "id": 35,
                        "type": "multiple-choice",
                        "question": "When evaluating ideas, you instinctively assess:",
                        "options": [
                            "A) Logical feasibility and practical implementation",
                            "B) Impact on relationships and team dynamics",
                            "C) Creative potential and innovative possibilities",
                            "D) Alignment with meaningful goals and values"
                        ],
                        "category": "Instinctive Responses"
                    }
                ]
            }
        ]
    },
    {
        "part": "Part III: Passion Audit Questions",
        "sections": [
            {
                "section": "Section A: Intrinsic Motivation Discovery",
                "questions": [
                    {
                        "id": 36,
                        "type": "multiple-choice",
                        "question": "When you have free time and no obligations, you're most drawn to activities that involve:",
                        "options": [
                            "A) Learning about how things work or solving puzzles",
                            "B) Connecting with people or helping others",
                            "C) Creating, building, or improving something",
                            "D) Exploring ideas, reading, or meaningful conversations"
                        ],
                        "category": "Intrinsic Motivation"
                    },
                    {
                        "id": 37,
                        "type": "multiple-choice",
                        "question": "You find yourself reading articles or watching videos about:",
                        "options": [
                            "A) Technology trends, scientific discoveries, or analytical methods",
                            "B) Psychology, relationships, or social dynamics",
                            "C) Design trends, creative processes, or innovative solutions",
                            "D) Philosophy, personal development, or societal issues"
                        ],
                        "category": "Intrinsic Motivation"
                    },
                    {
                        "id": 38,
                        "type": "multiple-choice",
                        "question": "The type of work that makes you forget to check the clock involves:",
                        "options": [
                            "A) Deep analysis, problem-solving, or technical challenges",
                            "B) Mentoring, team building, or relationship development",
                            "C) Creative projects, visual design, or innovative solutions",
                            "D) Writing, strategic thinking, or meaningful communication"
                        ],
                        "category": "Intrinsic Motivation"
                    },
                    {
                        "id": 39,
                        "type": "multiple-choice",
                        "question": "When you imagine your ideal career, it would primarily involve:",
                        "options": [
                            "A) Solving complex technical or analytical challenges",
                            "B) Working with people to achieve shared goals",
                            "C) Creating innovative solutions or beautiful designs",
                            "D) Contributing to meaningful causes or sharing important ideas"
                        ],
                        "category": "Intrinsic Motivation"
                    },
                    {
                        "id": 40,
                        "type": "multiple-choice",
                        "question": "You feel most energized at work when:",
                        "options": [
                            "A) Tackling difficult technical problems or optimizing systems",
                            "B) Building relationships and helping team members succeed",
                            "C) Developing creative solutions or improving user experiences",
                            "D) Working on projects that align with your deeper values"
                        ],
                        "category": "Intrinsic Motivation"
                    }
                ]
            },
            {
                "section": "Section B: Sustained Interest Patterns",
                "questions": [
                    {
                        "id": 41,
                        "type": "multiple-choice",
                        "question": "Looking back at your career, you've consistently been drawn to roles that:",
                        "options": [
                            "A) Required analytical thinking and systematic problem-solving",
                            "B) Involved working closely with people and building relationships",
                            "C) Allowed for creativity, innovation, or visual expression",
                            "D) Connected to a larger purpose or meaningful mission"
                        ],
                        "category": "Sustained Interest"
                    },
                    {
                        "id": 42,
                        "type": "multiple-choice",
                        "question": "When facing setbacks or challenges, you persist longest when the work involves:",
                        "options": [
                            "A) Technical mastery and logical problem-solving",
                            "B) People development and relationship building",
                            "C) Creative expression and innovative solutions",
                            "D) Meaningful impact and values alignment"
                        ],
                        "category": "Sustained Interest"
                    },
                    {
                        "id": 43,
                        "type": "multiple-choice",
                        "question": "Your most satisfying accomplishments have involved:",
                        "options": [
                            "A) Solving complex problems or improving technical systems",
                            "B) Helping others succeed or building strong teams",
                            "C) Creating something innovative or visually compelling",
                            "D) Contributing to important causes or sharing meaningful messages"
                        ],
                        "category": "Sustained Interest"
                    },
                    {
                        "id": 44,
                        "type": "multiple-choice",
                        "question": "When you daydream about work, you imagine yourself:",
                        "options": [
                            "A) Leading technical innovation or solving industry challenges",
                            "B) Building amazing teams or developing people's potential",
                            "C) Creating breakthrough designs or revolutionary products",
                            "D) Making a meaningful difference or inspiring others"
                        ],
                        "category": "Sustained Interest"
                    },
                    {
                        "id": 45,
                        "type": "multiple-choice",
                        "question": "The work activities that you would do even without pay include:",
                        "options": [
                            "A) Research, analysis, or technical problem-solving",
                            "B) Mentoring, coaching, or community building",
                            "C) Creative projects, design, or artistic expression",
                            "D) Writing, speaking, or advocating for important causes"
                        ],
                        "category": "Sustained Interest"
                    }
                ]
            },
            {
                "section": "Section C: Values-Driven Motivation",
                "questions": [
                    {
                        "id": 46,
                        "type": "multiple-choice",
                        "question": "Your ideal work environment would prioritize:",
                        "options": [
                            "A) Excellence in technical execution and logical decision-making",
                            "B) Collaboration, inclusion, and people development",
                            "C) Innovation, creativity, and aesthetic quality",
                            "D) Purpose, meaning, and positive social impact"
                        ],
                        "category": "Values-Driven Motivation"
                    },
                    {
                        "id": 47,
                        "type": "multiple-choice",
                        "question": "You feel most fulfilled when your work:",
                        "options": [
                            "A) Demonstrates technical mastery and analytical excellence",
                            "B) Strengthens relationships and builds community",
                            "C) Expresses creativity and pushes innovative boundaries",
                            "D) Serves a higher purpose and creates meaningful change"
                        ],
                        "category": "Values-Driven Motivation"
                    },
                    {
                        "id": 48,
                        "type": "multiple-choice",
                        "question": "When choosing between job opportunities, your primary driver is:",
                        "options": [
                            "A) Technical challenge and opportunity for analytical growth",
                            "B) Team culture and relationship-building potential",
                            "C) Creative freedom and innovative project opportunities",
                            "D) Mission alignment and meaningful impact potential"
                        ],
                        "category": "Values-Driven Motivation"
                    },
                    {
                        "id": 49,
                        "type": "multiple-choice",
                        "question": "You're willing to work through difficulties when the outcome involves:",
                        "options": [
                            "A) Technical breakthrough or systematic improvement",
                            "B) People development or relationship strengthening",
                            "C) Creative achievement or innovative solution",
                            "D) Meaningful contribution or values expression"
                        ],
                        "category": "Values-Driven Motivation"
                    },
                    {
                        "id": 50,
                        "type": "multiple-choice",
                        "question": "Your definition of career success centers on:",
                        "options": [
                            "A) Technical expertise and analytical problem-solving mastery",
                            "B) Relationship building and positive impact on others",
                            "C) Creative achievement and innovative contributions",
                            "D) Meaningful work and alignment with personal values"
                        ],
                        "category": "Values-Driven Motivation"
                    }
                ]
            }
        ]
    },
    {
        "part": "Part IV: Genius Factor Mapping Assessment",
        "sections": [
            {
                "section": "Section A: Work Style Preferences",
                "questions": [
                    {
                        "id": 51,
                        "type": "multiple-choice",
                        "question": "When assigned to lead a new project, your first instinct is to:",
                        "options": [
                            "A) Create detailed technical specifications and systematic workflows",
                            "B) Organize team meetings to understand everyone's strengths and perspectives",
                            "C) Sketch out visual concepts and design the user experience",
                            "D) Research the market and develop strategic messaging",
                            "E) Build prototypes and test different approaches hands-on",
                            "F) Analyze data trends and create predictive models",
                            "G) Assess environmental impact and sustainability considerations",
                            "H) Write comprehensive project documentation and communication plans",
                            "I) Reflect on the project's deeper purpose and long-term significance"
                        ],
                        "category": "Work Style Preferences"
                    },
                    {
                        "id": 52,
                        "type": "multiple-choice",
                        "question": "Your ideal work environment would include:",
                        "options": [
                            "A) State-of-the-art technology and systematic organization",
                            "B) Open collaboration spaces and frequent team interaction",
                            "C) Creative studios with design tools and visual inspiration",
                            "D) Quiet spaces for writing and strategic thinking",
                            "E) Hands-on workshops and physical activity options",
                            "F) Data visualization tools and analytical resources",
                            "G) Natural lighting and environmentally conscious design",
                            "H) Libraries and resources for research and communication",
                            "I) Meditation spaces and areas for reflection"
                        ],
                        "category": "Work Style Preferences"
                    },
                    {
                        "id": 53,
                        "type": "multiple-choice",
                        "question": "When solving problems, you naturally:",
                        "options": [
                            "A) Break them down into logical components and systematic processes",
                            "B) Gather input from stakeholders and build collaborative solutions",
                            "C) Visualize different scenarios and create innovative designs",
                            "D) Research best practices and develop strategic communications",
                            "E) Create physical models or prototypes to test ideas",
                            "F) Analyze patterns in data to identify optimal solutions",
                            "G) Consider environmental and sustainability implications",
                            "H) Document the process and create clear explanations",
                            "I) Explore the deeper meaning and long-term impact"
                        ],
                        "category": "Work Style Preferences"
                    }
                ]
            },
            {
                "section": "Section B: Energy and Flow States",
                "questions": [
                    {
                        "id": 54,
                        "type": "multiple-choice",
                        "question": "You experience 'flow state' most often when:",
                        "options": [
                            "A) Coding, programming, or working with complex technical systems",
                            "B) Facilitating meetings, coaching others, or building team consensus",
                            "C) Designing interfaces, creating visual content, or developing aesthetic solutions",
                            "D) Writing strategic plans, developing messaging, or creating content",
                            "E) Building things with your hands, exercising, or engaging in physical activities",
                            "F) Analyzing datasets, creating financial models, or solving mathematical problems",
                            "G) Working outdoors, researching sustainability, or connecting with nature",
                            "H) Writing reports, creating documentation, or developing communication materials",
                            "I) Mentoring others, exploring philosophy, or working on meaningful causes"
                        ],
                        "category": "Energy and Flow States"
                    },
                    {
                        "id": 55,
                        "type": "multiple-choice",
                        "question": "Your most energizing work activities involve:",
                        "options": [
                            "A) Debugging systems, optimizing processes, or solving technical challenges",
                            "B) Building relationships, resolving conflicts, or developing people",
                            "C) Creating visual experiences, designing products, or innovating solutions",
                            "D) Developing strategies, crafting messages, or influencing outcomes",
                            "E) Physical coordination, hands-on building, or kinesthetic learning",
                            "F) Data analysis, financial planning, or quantitative problem-solving",
                            "G) Environmental research, sustainability planning, or nature-based solutions",
                            "H) Writing, editing, or creating clear communication materials",
                            "I) Counseling, spiritual guidance, or exploring life's deeper questions"
                        ],
                        "category": "Energy and Flow States"
                    },
                    {
                        "id": 56,
                        "type": "multiple-choice",
                        "question": "When you're most productive, you're typically:",
                        "options": [
                            "A) Working with technology, systems, or logical frameworks",
                            "B) Collaborating with others, building networks, or facilitating connections",
                            "C) Creating visual content, designing experiences, or innovating products",
                            "D) Developing strategic communications, writing, or influencing decisions",
                            "E) Moving around, using physical tools, or engaging in hands-on activities",
                            "F) Working with numbers, analyzing trends, or creating predictive models",
                            "G) Researching environmental solutions, working outdoors, or promoting sustainability",
                            "H) Writing, documenting, or creating educational materials",
                            "I) Providing guidance, exploring meaning, or working on purpose-driven initiatives"
                        ],
                        "category": "Energy and Flow States"
                    }
                ]
            },
            {
                "section": "Section C: Natural Talents Recognition",
                "questions": [
                    {
                        "id": 57,
                        "type": "multiple-choice",
                        "question": "Others consistently seek your expertise in:",
                        "options": [
                            "A) Technology troubleshooting, system optimization, or technical problem-solving",
                            "B) Relationship advice, team dynamics, or interpersonal communication",
                            "C) Design feedback, creative direction, or visual problem-solving",
                            "D) Strategic planning, messaging development, or communication strategy",
                            "E) Physical coordination, hands-on projects, or kinesthetic learning",
                            "F) Data interpretation, financial analysis, or quantitative decision-making",
                            "G) Environmental awareness, sustainability practices, or nature-based solutions",
                            "H) Writing assistance, documentation, or clear communication",
                            "I) Life guidance, meaningful conversations, or spiritual/philosophical insights"
                        ],
                        "category": "Natural Talents"
                    },
                    {
                        "id": 58,
                        "type": "multiple-choice",
                        "question": "Your colleagues would describe your unique strength as:",
                        "options": [
                            "A) Technical mastery and systematic problem-solving",
                            "B) Relationship building and team facilitation",
                            "C) Creative vision and innovative design thinking",
                            "D) Strategic communication and influential messaging",
                            "E) Physical coordination and hands-on implementation",
                            "F) Analytical thinking and data-driven decision making",
                            "G) Environmental consciousness and sustainable thinking",
                            "H) Clear communication and excellent writing skills",
                            "I) Wisdom, empathy, and meaningful perspective"
                        ],
                        "category": "Natural Talents"
                    },
                    {
                        "id": 59,
                        "type": "multiple-choice",
                        "question": "When learning new skills, you excel most quickly in areas involving:",
                        "options": [
                            "A) Technology, programming, or systematic processes",
                            "B) Interpersonal dynamics, communication, or relationship building",
                            "C) Visual design, spatial reasoning, or creative expression",
                            "D) Strategic thinking, persuasion, or message development",
                            "E) Physical coordination, hands-on building, or kinesthetic activities",
                            "F) Mathematical concepts, data analysis, or quantitative reasoning",
                            "G) Environmental science, sustainability, or nature-based systems",
                            "H) Writing, language, or communication techniques",
                            "I) Psychology, philosophy, or meaning-making frameworks"
                        ],
                        "category": "Natural Talents"
                    }
                ]
            },
            {
                "section": "Section D: Industry and Role Alignment",
                "questions": [
                    {
                        "id": 60,
                        "type": "multiple-choice",
                        "question": "In Fortune 1000 companies, you would thrive most in roles involving:",
                        "options": [
                            "A) Software development, IT infrastructure, cybersecurity, or technical innovation",
                            "B) Human resources, sales, customer relations, or organizational development",
                            "C) Product design, user experience, marketing creative, or brand development",
                            "D) Corporate communications, public relations, content strategy, or executive messaging",
                            "E) Operations management, manufacturing, logistics, or hands-on implementation",
                            "F) Financial analysis, business intelligence, data science, or strategic planning",
                            "G) Sustainability initiatives, environmental compliance, or corporate social responsibility",
                            "H) Technical writing, internal communications, training development, or documentation",
                            "I) Executive coaching, organizational culture, change management, or purpose-driven initiatives"
                        ],
                        "category": "Industry and Role Alignment"
                    },
                    {
                        "id": 61,
                        "type": "multiple-choice",
                        "question": "Your ideal Fortune 1000 career path would lead toward:",
                        "options": [
                            "A) Chief Technology Officer, VP of Engineering, or Director of Innovation",
                            "B) Chief People Officer, VP of Sales, or Director of Customer Success",
                            "C) Chief Design Officer, VP of Marketing, or Director of Brand Experience",
                            "D) Chief Communications Officer, VP of Strategy, or Director of Public Relations",
                            "E) Chief Operations Officer, VP of Manufacturing, or Director of Implementation",
                            "F) Chief Financial Officer, VP of Analytics, or Director of Business Intelligence",
                            "G) Chief Sustainability Officer, VP of Environmental Affairs, or Director of CSR",
                            "H) Chief Content Officer, VP of Communications, or Director of Learning & Development",
                            "I) Chief Culture Officer, VP of Purpose & Values, or Director of Executive Development"
                        ],
                        "category": "Industry and Role Alignment"
                    },
                    {
                        "id": 62,
                        "type": "multiple-choice",
                        "question": "When considering internal mobility within a Fortune 1000 company, you would be most excited about opportunities in:",
                        "options": [
                            "A) Technology divisions, R&D departments, or innovation labs",
                            "B) People & culture teams, sales organizations, or customer-facing roles",
                            "C) Design studios, marketing departments, or product development teams",
                            "D) Communications teams, strategy groups, or executive support functions",
                            "E) Operations centers, manufacturing facilities, or implementation teams",
                            "F) Finance departments, analytics teams, or business intelligence groups",
                            "G) Sustainability offices, environmental teams, or social impact initiatives",
                            "H) Content teams, training departments, or internal communication roles",
                            "I) Leadership development, organizational effectiveness, or culture transformation teams"
                        ],
                        "category": "Industry and Role Alignment"
                    }
                ]
            }
        ]
    }
]


def get_questions_by_part() -> List[Dict]:
    """
    Aplatit la banque en [{part, questions: [question + section]}].
    L'ordre d'origine est conservé : c'est l'ordre de navigation.
    """
    return [
        {
            "part": part["part"],
            "questions": [
                {**question, "section": section["section"]}
                for section in part["sections"]
                for question in section["questions"]
            ],
        }
        for part in QUESTION_BANK
    ]


def get_question_ids() -> List[int]:
    return [
        question["id"]
        for part in QUESTION_BANK
        for section in part["sections"]
        for question in section["questions"]
    ]
