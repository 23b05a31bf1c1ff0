"""Offline translations for the object categories the detector can report.

Rows are (category, english, french, german, italian).
"""

DEFAULT_TRANSLATIONS = (
    # People & Body Parts
    ("human_face", "Human Face", "Visage humain", "Menschliches Gesicht", "Volto umano"),
    ("human_hand", "Human Hand", "Main humaine", "Menschliche Hand", "Mano umana"),
    ("person", "Person", "Personne", "Person", "Persona"),
    ("skull", "Skull", "Crâne", "Schädel", "Teschio"),

    # Vehicles
    ("aircraft", "Aircraft", "Avion", "Flugzeug", "Aereo"),
    ("bicycle", "Bicycle", "Vélo", "Fahrrad", "Bicicletta"),
    ("boat", "Boat", "Bateau", "Boot", "Barca"),
    ("bus", "Bus", "Bus", "Bus", "Autobus"),
    ("car", "Car", "Voiture", "Auto", "Macchina"),
    ("cart", "Cart", "Chariot", "Wagen", "Carrello"),
    ("motorcycle", "Motorcycle", "Moto", "Motorrad", "Motocicletta"),
    ("taxi", "Taxi", "Taxi", "Taxi", "Taxi"),
    ("train", "Train", "Train", "Zug", "Treno"),
    ("truck", "Truck", "Camion", "Lastwagen", "Camion"),
    ("vehicle", "Vehicle", "Véhicule", "Fahrzeug", "Veicolo"),
    ("wheel", "Wheel", "Roue", "Rad", "Ruota"),
    ("wheelchair", "Wheelchair", "Fauteuil roulant", "Rollstuhl", "Sedia a rotelle"),

    # Street & Infrastructure
    ("bench", "Bench", "Banc", "Bank", "Panchina"),
    ("billboard", "Billboard", "Panneau publicitaire", "Werbetafel", "Cartellone pubblicitario"),
    ("christmas_tree", "Christmas Tree", "Sapin de Noël", "Weihnachtsbaum", "Albero di Natale"),
    ("door", "Door", "Porte", "Tür", "Porta"),
    ("door_handle", "Door Handle", "Poignée de porte", "Türklinke", "Maniglia della porta"),
    ("fire_hydrant", "Fire Hydrant", "Bouche d'incendie", "Hydrant", "Idrante"),
    ("flag", "Flag", "Drapeau", "Flagge", "Bandiera"),
    ("parking_meter", "Parking Meter", "Parcmètre", "Parkuhr", "Parchimetro"),
    ("poster", "Poster", "Affiche", "Plakat", "Poster"),
    ("sculpture", "Sculpture", "Sculpture", "Skulptur", "Scultura"),
    ("street_light", "Street Light", "Lampadaire", "Straßenlaterne", "Lampione"),
    ("traffic_light", "Traffic Light", "Feu de circulation", "Ampel", "Semaforo"),
    ("traffic_sign", "Traffic Sign", "Panneau de signalisation", "Verkehrsschild", "Segnale stradale"),
    ("waste_container", "Waste Container", "Poubelle", "Mülleimer", "Contenitore dei rifiuti"),
    ("water_feature", "Water Feature", "Fontaine", "Wasserspiel", "Fontana"),
    ("window", "Window", "Fenêtre", "Fenster", "Finestra"),

    # Clothing & Accessories
    ("backpack", "Backpack", "Sac à dos", "Rucksack", "Zaino"),
    ("clothing", "Clothing", "Vêtements", "Kleidung", "Abbigliamento"),
    ("coat", "Coat", "Manteau", "Mantel", "Cappotto"),
    ("dress", "Dress", "Robe", "Kleid", "Vestito"),
    ("fedora", "Fedora", "Fedora", "Fedora", "Fedora"),
    ("footwear", "Footwear", "Chaussures", "Schuhe", "Calzature"),
    ("glasses", "Glasses", "Lunettes", "Brille", "Occhiali"),
    ("handbag", "Handbag", "Sac à main", "Handtasche", "Borsa"),
    ("headwear", "Headwear", "Couvre-chef", "Kopfbedeckung", "Copricapo"),
    ("roller_skates", "Roller Skates", "Patins à roulettes", "Rollschuhe", "Pattini a rotelle"),
    ("shirt", "Shirt", "Chemise", "Hemd", "Camicia"),
    ("shorts", "Shorts", "Short", "Shorts", "Pantaloncini"),
    ("skirt", "Skirt", "Jupe", "Rock", "Gonna"),
    ("sock", "Sock", "Chaussette", "Socke", "Calzino"),
    ("suit", "Suit", "Costume", "Anzug", "Abito"),
    ("suitcase", "Suitcase", "Valise", "Koffer", "Valigia"),
    ("tie", "Tie", "Cravate", "Krawatte", "Cravatta"),
    ("trousers", "Trousers", "Pantalon", "Hose", "Pantaloni"),
    ("umbrella", "Umbrella", "Parapluie", "Regenschirm", "Ombrello"),

    # Sports & Recreation
    ("baseball_bat", "Baseball Bat", "Batte de baseball", "Baseballschläger", "Mazza da baseball"),
    ("baseball_glove", "Baseball Glove", "Gant de baseball", "Baseballhandschuh", "Guanto da baseball"),
    ("football", "Football", "Football", "Fußball", "Pallone"),
    ("frisbee", "Frisbee", "Frisbee", "Frisbee", "Frisbee"),
    ("kite", "Kite", "Cerf-volant", "Drachen", "Aquilone"),
    ("paddle", "Paddle", "Pagaie", "Paddel", "Pagaia"),
    ("rugby_ball", "Rugby Ball", "Ballon de rugby", "Rugbyball", "Palla da rugby"),
    ("skateboard", "Skateboard", "Skateboard", "Skateboard", "Skateboard"),
    ("skis", "Skis", "Skis", "Ski", "Sci"),
    ("snowboard", "Snowboard", "Snowboard", "Snowboard", "Snowboard"),
    ("sports_ball", "Sports Ball", "Ballon de sport", "Sportball", "Palla sportiva"),
    ("surfboard", "Surfboard", "Planche de surf", "Surfbrett", "Tavola da surf"),
    ("tennis_ball", "Tennis Ball", "Balle de tennis", "Tennisball", "Palla da tennis"),
    ("tennis_racket", "Tennis Racket", "Raquette de tennis", "Tennisschläger", "Racchetta da tennis"),

    # Musical Instruments
    ("accordion", "Accordion", "Accordéon", "Akkordeon", "Fisarmonica"),
    ("brass_instrument", "Brass Instrument", "Instrument en laiton", "Blechblasinstrument", "Strumento a ottone"),
    ("drum", "Drum", "Tambour", "Trommel", "Tamburo"),
    ("flute", "Flute", "Flûte", "Flöte", "Flauto"),
    ("guitar", "Guitar", "Guitare", "Gitarre", "Chitarra"),
    ("musical_instrument", "Musical Instrument", "Instrument de musique", "Musikinstrument", "Strumento musicale"),
    ("piano", "Piano", "Piano", "Klavier", "Pianoforte"),
    ("string_instrument", "String Instrument", "Instrument à cordes", "Saiteninstrument", "Strumento a corde"),
    ("violin", "Violin", "Violon", "Geige", "Violino"),

    # Food & Drink
    ("apple", "Apple", "Pomme", "Apfel", "Mela"),
    ("banana", "Banana", "Banane", "Banane", "Banana"),
    ("berry", "Berry", "Baie", "Beere", "Bacca"),
    ("broccoli", "Broccoli", "Brocoli", "Brokkoli", "Broccoli"),
    ("carrot", "Carrot", "Carotte", "Karotte", "Carota"),
    ("citrus", "Citrus", "Agrume", "Zitrusfrucht", "Agrume"),
    ("coconut", "Coconut", "Noix de coco", "Kokosnuss", "Cocco"),
    ("egg", "Egg", "Œuf", "Ei", "Uovo"),
    ("food", "Food", "Nourriture", "Essen", "Cibo"),
    ("grape", "Grape", "Raisin", "Traube", "Uva"),
    ("mushroom", "Mushroom", "Champignon", "Pilz", "Fungo"),
    ("pear", "Pear", "Poire", "Birne", "Pera"),
    ("pumpkin", "Pumpkin", "Citrouille", "Kürbis", "Zucca"),
    ("tomato", "Tomato", "Tomate", "Tomate", "Pomodoro"),
    ("drink", "Drink", "Boisson", "Getränk", "Bevanda"),
    ("hot_drink", "Hot Drink", "Boisson chaude", "Heißgetränk", "Bevanda calda"),
    ("juice", "Juice", "Jus", "Saft", "Succo"),
    ("bread", "Bread", "Pain", "Brot", "Pane"),
    ("cake", "Cake", "Gâteau", "Kuchen", "Torta"),
    ("cheese", "Cheese", "Fromage", "Käse", "Formaggio"),
    ("dessert", "Dessert", "Dessert", "Nachtisch", "Dolce"),
    ("donut", "Donut", "Beignet", "Donut", "Ciambella"),
    ("fast_food", "Fast Food", "Restauration rapide", "Fast Food", "Fast food"),
    ("french_fries", "French Fries", "Frites", "Pommes frites", "Patatine fritte"),
    ("hamburger", "Hamburger", "Hamburger", "Hamburger", "Hamburger"),
    ("hot_dog", "Hot Dog", "Hot-dog", "Hot Dog", "Hot dog"),
    ("ice_cream", "Ice Cream", "Glace", "Eiscreme", "Gelato"),
    ("pizza", "Pizza", "Pizza", "Pizza", "Pizza"),
    ("sandwich", "Sandwich", "Sandwich", "Sandwich", "Panino"),
    ("sushi", "Sushi", "Sushi", "Sushi", "Sushi"),

    # Household Items
    ("bed", "Bed", "Lit", "Bett", "Letto"),
    ("chair", "Chair", "Chaise", "Stuhl", "Sedia"),
    ("couch", "Couch", "Canapé", "Sofa", "Divano"),
    ("furniture", "Furniture", "Meuble", "Möbel", "Mobile"),
    ("shelves", "Shelves", "Étagères", "Regale", "Scaffali"),
    ("storage_cabinet", "Storage Cabinet", "Armoire de rangement", "Schrank", "Armadio"),
    ("table", "Table", "Table", "Tisch", "Tavolo"),
    ("bathtub", "Bathtub", "Baignoire", "Badewanne", "Vasca da bagno"),
    ("fireplace", "Fireplace", "Cheminée", "Kamin", "Camino"),
    ("microwave", "Microwave", "Micro-ondes", "Mikrowelle", "Microonde"),
    ("oven", "Oven", "Four", "Ofen", "Forno"),
    ("refrigerator", "Refrigerator", "Réfrigérateur", "Kühlschrank", "Frigorifero"),
    ("screen", "Screen", "Écran", "Bildschirm", "Schermo"),
    ("sink", "Sink", "Évier", "Waschbecken", "Lavandino"),
    ("tap", "Tap", "Robinet", "Wasserhahn", "Rubinetto"),
    ("toaster", "Toaster", "Grille-pain", "Toaster", "Tostapane"),
    ("toilet", "Toilet", "Toilette", "Toilette", "Toilette"),

    # Objects & Miscellaneous
    ("balloon", "Balloon", "Ballon", "Ballon", "Palloncino"),
    ("barrel", "Barrel", "Tonneau", "Fass", "Barile"),
    ("book", "Book", "Livre", "Buch", "Libro"),
    ("bottle", "Bottle", "Bouteille", "Flasche", "Bottiglia"),
    ("bowl", "Bowl", "Bol", "Schüssel", "Ciotola"),
    ("box", "Box", "Boîte", "Kiste", "Scatola"),
    ("camera", "Camera", "Appareil photo", "Kamera", "Macchina fotografica"),
    ("candle", "Candle", "Bougie", "Kerze", "Candela"),
    ("cannon", "Cannon", "Canon", "Kanone", "Cannone"),
    ("chopsticks", "Chopsticks", "Baguettes", "Essstäbchen", "Bacchette"),
    ("clock", "Clock", "Horloge", "Uhr", "Orologio"),
    ("coin", "Coin", "Pièce de monnaie", "Münze", "Moneta"),
    ("computer_keyboard", "Computer Keyboard", "Clavier d'ordinateur", "Computertastatur", "Tastiera del computer"),
    ("computer_mouse", "Computer Mouse", "Souris d'ordinateur", "Computermaus", "Mouse del computer"),
    ("cooking_pan", "Cooking Pan", "Poêle", "Pfanne", "Padella"),
    ("cup", "Cup", "Tasse", "Tasse", "Tazza"),
    ("curtain", "Curtain", "Rideau", "Vorhang", "Tenda"),
    ("doll", "Doll", "Poupée", "Puppe", "Bambola"),
    ("flowerpot", "Flowerpot", "Pot de fleurs", "Blumentopf", "Vaso di fiori"),
    ("fork", "Fork", "Fourchette", "Gabel", "Forchetta"),
    ("hair_dryer", "Hair Dryer", "Sèche-cheveux", "Haartrockner", "Asciugacapelli"),
    ("headphones", "Headphones", "Écouteurs", "Kopfhörer", "Cuffie"),
    ("jug", "Jug", "Cruche", "Krug", "Brocca"),
    ("knife", "Knife", "Couteau", "Messer", "Coltello"),
    ("lamp", "Lamp", "Lampe", "Lampe", "Lampada"),
    ("laptop", "Laptop", "Ordinateur portable", "Laptop", "Computer portatile"),
    ("microphone", "Microphone", "Microphone", "Mikrofon", "Microfono"),
    ("pen", "Pen", "Stylo", "Stift", "Penna"),
    ("phone", "Phone", "Téléphone", "Telefon", "Telefono"),
    ("pillow", "Pillow", "Oreiller", "Kissen", "Cuscino"),
    ("plate", "Plate", "Assiette", "Teller", "Piatto"),
    ("potted_plant", "Potted Plant", "Plante en pot", "Topfpflanze", "Pianta in vaso"),
    ("remote", "Remote", "Télécommande", "Fernbedienung", "Telecomando"),
    ("scissors", "Scissors", "Ciseaux", "Schere", "Forbici"),
    ("snowman", "Snowman", "Bonhomme de neige", "Schneemann", "Pupazzo di neve"),
    ("spoon", "Spoon", "Cuillère", "Löffel", "Cucchiaio"),
    ("teapot", "Teapot", "Théière", "Teekanne", "Teiera"),
    ("teddy_bear", "Teddy Bear", "Ours en peluche", "Teddybär", "Orsacchiotto"),
    ("tin_can", "Tin Can", "Boîte de conserve", "Dose", "Lattina"),
    ("toothbrush", "Toothbrush", "Brosse à dents", "Zahnbürste", "Spazzolino da denti"),
    ("toy", "Toy", "Jouet", "Spielzeug", "Giocattolo"),
    ("watch", "Watch", "Montre", "Uhr", "Orologio"),
    ("wine_glass", "Wine Glass", "Verre à vin", "Weinglas", "Bicchiere da vino"),

    # Plants & Flowers
    ("flower", "Flower", "Fleur", "Blume", "Fiore"),
    ("rose", "Rose", "Rose", "Rose", "Rosa"),
    ("sunflower", "Sunflower", "Tournesol", "Sonnenblume", "Girasole"),

    # Animals
    ("animal", "Animal", "Animal", "Tier", "Animale"),
    ("bird", "Bird", "Oiseau", "Vogel", "Uccello"),
    ("parrot", "Parrot", "Perroquet", "Papagei", "Pappagallo"),
    ("water_bird", "Water Bird", "Oiseau aquatique", "Wasservogel", "Uccello acquatico"),
    ("butterfly", "Butterfly", "Papillon", "Schmetterling", "Farfalla"),
    ("insect", "Insect", "Insecte", "Insekt", "Insetto"),
    ("dolphin", "Dolphin", "Dauphin", "Delfin", "Delfino"),
    ("fish", "Fish", "Poisson", "Fisch", "Pesce"),
    ("goldfish", "Goldfish", "Poisson rouge", "Goldfisch", "Pesce rosso"),
    ("jellyfish", "Jellyfish", "Méduse", "Qualle", "Medusa"),
    ("seal", "Seal", "Phoque", "Robbe", "Foca"),
    ("shellfish", "Shellfish", "Crustacé", "Schalentier", "Crostaceo"),
    ("whale", "Whale", "Baleine", "Wal", "Balena"),
    ("alpaca", "Alpaca", "Alpaga", "Alpaka", "Alpaca"),
    ("bear", "Bear", "Ours", "Bär", "Orso"),
    ("big_cat", "Big Cat", "Grand félin", "Großkatze", "Grande felino"),
    ("camel", "Camel", "Chameau", "Kamel", "Cammello"),
    ("cat", "Cat", "Chat", "Katze", "Gatto"),
    ("cow", "Cow", "Vache", "Kuh", "Mucca"),
    ("crocodile", "Crocodile", "Crocodile", "Krokodil", "Coccodrillo"),
    ("deer", "Deer", "Cerf", "Hirsch", "Cervo"),
    ("dog", "Dog", "Chien", "Hund", "Cane"),
    ("elephant", "Elephant", "Éléphant", "Elefant", "Elefante"),
    ("frog", "Frog", "Grenouille", "Frosch", "Rana"),
    ("giraffe", "Giraffe", "Girafe", "Giraffe", "Giraffa"),
    ("hippopotamus", "Hippopotamus", "Hippopotame", "Nilpferd", "Ippopotamo"),
    ("horse", "Horse", "Cheval", "Pferd", "Cavallo"),
    ("kangaroo", "Kangaroo", "Kangourou", "Känguru", "Canguro"),
    ("panda", "Panda", "Panda", "Panda", "Panda"),
    ("pig", "Pig", "Cochon", "Schwein", "Maiale"),
    ("polar_bear", "Polar Bear", "Ours polaire", "Eisbär", "Orso polare"),
    ("rabbit", "Rabbit", "Lapin", "Kaninchen", "Coniglio"),
    ("reptile", "Reptile", "Reptile", "Reptil", "Rettile"),
    ("rhinoceros", "Rhinoceros", "Rhinocéros", "Nashorn", "Rinoceronte"),
    ("sheep", "Sheep", "Mouton", "Schaf", "Pecora"),
    ("squirrel", "Squirrel", "Écureuil", "Eichhörnchen", "Scoiattolo"),
    ("turtle", "Turtle", "Tortue", "Schildkröte", "Tartaruga"),
    ("zebra", "Zebra", "Zèbre", "Zebra", "Zebra"),
)
